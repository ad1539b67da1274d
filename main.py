import argparse
import sys

from symbol_graph import SymbolGraph

# --- Settings ---
ROUTES_FILE = "routes.txt"
DELIMITER = " "
QUIT_WORD = "quit"


def lookup_loop(sg, stream=sys.stdin):
    """Reads vertex names until QUIT_WORD or EOF and prints their neighbours."""
    print("Enter an airport code:")
    for line in stream:
        name = line.strip()
        if name == QUIT_WORD:
            break
        if not name:
            continue

        if sg.contains(name):
            print(f"✈️ {name}: " + " ".join(sg.adjacent_names(name)))
        else:
            print(f"❌ {name} is not in the graph")
        print("Enter an airport code:")


def main(filename, delimiter):
    try:
        sg = SymbolGraph(filename, delimiter)
    except FileNotFoundError as e:
        print(f"❌ Cannot open routes file: {e}")
        return 1

    lookup_loop(sg)
    print("👋 Bye.")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Look up adjacent vertices in a symbol graph.")
    parser.add_argument("-f", "--file", default=ROUTES_FILE, help="Path to the routes file.")
    parser.add_argument("-d", "--delimiter", default=DELIMITER, help="Field delimiter (regular expression).")
    args = parser.parse_args()

    sys.exit(main(args.file, args.delimiter))

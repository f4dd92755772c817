import glob
import os
import sys
from typing import List, Optional

from load_data import LoadError, find_duplicates, parse_graph, read_text
from report import format_header, report_run

input_dir = "data/"

# "bottleneck" pushes the whole bottleneck per path, "unit" one unit per path
augment_mode = "bottleneck"


def default_files() -> List[str]:
    return sorted(glob.glob(os.path.join(input_dir, "match*.txt")))


def run_file(file_name: str, mode: str = "bottleneck") -> None:
    print(format_header(file_name))
    text = read_text(file_name)
    graph = parse_graph(text, file_name)

    dups = find_duplicates(text)
    if dups:
        listed = ", ".join(f"{u}->{v}" for u, v in dups)
        print(f"Warning: duplicate edges {listed} in {file_name}, last entry kept")

    report_run(graph, mode)


def main(argv: Optional[List[str]] = None) -> int:
    files = sys.argv[1:] if argv is None else argv
    if not files:
        files = default_files()

    failed = 0
    for file_name in files:
        try:
            run_file(file_name, augment_mode)
        except (OSError, LoadError) as e:
            print(f"Error: {e}")
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

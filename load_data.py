from typing import List, Tuple

from add_edge import add_edge
from residual_graph import ResidualGraph


class LoadError(ValueError):
    """
    Input file could not be turned into a graph.
    """


class MalformedInputError(LoadError):
    pass


class OutOfRangeError(LoadError):
    pass


class NegativeCapacityError(LoadError):
    pass


def _to_ints(tokens: List[str], name: str) -> List[int]:
    values = []
    for i, token in enumerate(tokens):
        try:
            values.append(int(token))
        except ValueError:
            raise MalformedInputError(
                f"{name}: token {i} ({token!r}) is not an integer"
            ) from None
    return values


def parse_graph(text: str, name: str = "") -> ResidualGraph:
    """
    Build a residual graph from whitespace-delimited integers:
        N
        u v cap weight
        ...
    A repeated (u, v) pair overwrites the earlier one.
    """
    values = _to_ints(text.split(), name)
    if not values:
        raise MalformedInputError(f"{name}: missing vertex count")

    n, rest = values[0], values[1:]
    if n < 1:
        raise MalformedInputError(f"{name}: vertex count must be positive, got {n}")
    if len(rest) % 4:
        raise MalformedInputError(
            f"{name}: incomplete edge record at end of input "
            f"({len(rest) % 4} trailing value(s))"
        )

    graph = ResidualGraph(n, name)
    for i in range(0, len(rest), 4):
        u, v, cap, weight = rest[i:i + 4]
        if cap < 0:
            raise NegativeCapacityError(f"{name}: edge {u}->{v} has capacity {cap}")
        if not add_edge(graph, u, v, cap, weight):
            raise OutOfRangeError(
                f"{name}: edge {u}->{v} references a vertex outside [0, {n})"
            )
    return graph


def read_text(file_name: str) -> str:
    """
    Contents of `file_name`. OSError from opening/reading is left to the
    caller; undecodable bytes count as malformed input.
    """
    try:
        with open(file_name) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{file_name}: not a text file ({e.reason})") from e


def load_graph(file_name: str) -> ResidualGraph:
    """
    Read `file_name` and build its residual graph.
    """
    return parse_graph(read_text(file_name), file_name)


def find_duplicates(text: str) -> List[Tuple[int, int]]:
    """
    (u, v) pairs listed more than once; only the last listing takes effect.
    Expects text that already parses.
    """
    values = [int(token) for token in text.split()][1:]
    seen = set()
    duplicates = []
    for i in range(0, len(values) - 3, 4):
        pair = (values[i], values[i + 1])
        if pair in seen and pair not in duplicates:
            duplicates.append(pair)
        seen.add(pair)
    return duplicates

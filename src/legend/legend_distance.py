"""Edit distance between lines."""


def distance(a: str, b: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1.  Comparison is made
    over code points.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning `a` into `b`
    """
    if not a:
        return len(b)

    if not b:
        return len(a)

    # Keep the shorter string along the row to bound memory use
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
                continue

            current.append(min(
                previous[j - 1] + 1,  # substitution
                current[j - 1] + 1,  # insertion
                previous[j] + 1  # deletion
            ))

        previous = current

    return previous[-1]

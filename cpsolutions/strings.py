"""Solutions to string-processing contest problems."""

from string import ascii_lowercase

_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
    "Icosahedron": 20,
}
_BORZE = {".": "1", "-": "2"}


def _is_palindrome(text):
    return text == text[::-1]


def compare_ignoring_case(first, second):
    """Compare two strings case-insensitively: -1, 0 or 1."""
    a, b = first.lower(), second.lower()
    return (a > b) - (a < b)


def is_amusing_joke(guest, host, pile):
    """Whether the letters of ``pile`` are exactly those of ``guest`` and ``host``."""
    return sorted(guest + host) == sorted(pile)


def insert_a(text):
    """Insert one ``'a'`` so the result is not a palindrome, or return None.

    The letter is tried first at the front, then just before the last
    character.
    """
    if not text:
        raise ValueError("text must not be empty")
    front = "a" + text
    if not _is_palindrome(front):
        return front
    inner = text[:-1] + "a" + text[-1]
    if not _is_palindrome(inner):
        return inner
    return None


def is_yes(text):
    """Whether ``text`` spells YES in any mix of cases."""
    return text.upper() == "YES"


def typing_time(password):
    """Seconds to type ``password``: 2 for the first key, then 1 per repeat and 2 per change."""
    return 2 + sum(1 if prev == cur else 2 for prev, cur in zip(password, password[1:]))


def strong_password(password):
    """Insert one lowercase letter so that the typing time is as long as possible.

    Letters are tried from ``a`` to ``z`` and positions from left to right;
    the first candidate reaching the highest time wins.
    """
    best = ""
    best_time = 0
    for letter in ascii_lowercase:
        for pos in range(len(password) + 1):
            candidate = password[:pos] + letter + password[pos:]
            time = typing_time(candidate)
            if time > best_time:
                best_time = time
                best = candidate
    return best


def gender_by_username(name):
    """Verdict by the parity of the number of distinct characters in ``name``."""
    distinct = len(set(name))
    if distinct % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def stones_to_remove(stones):
    """Stones to take so that no two neighbours share a colour."""
    return sum(1 for prev, cur in zip(stones, stones[1:]) if prev == cur)


def queue_after(queue, seconds):
    """The queue after ``seconds`` steps in which every boy lets the girl behind him pass."""
    for _ in range(seconds):
        queue = queue.replace("BG", "GB")
    return queue


def capitalize(word):
    """``word`` with its first character upper-cased and the rest untouched."""
    return word[:1].upper() + word[1:]


def bit_plus_plus(statements):
    """Final value of ``x`` after running increment and decrement statements from 0."""
    return sum(1 if statement in ("++X", "X++") else -1 for statement in statements)


def decode_borze(code):
    """Decode Borze: ``.`` is 0, ``-.`` is 1 and ``--`` is 2."""
    digits = []
    chars = iter(code)
    for char in chars:
        if char == ".":
            digits.append("0")
        elif char == "-":
            following = next(chars, None)
            if following not in _BORZE:
                raise ValueError("incomplete Borze code after '-'")
            digits.append(_BORZE[following])
        else:
            raise ValueError(f"invalid Borze character {char!r}")
    return "".join(digits)


def helpful_maths(expression):
    """Rewrite a sum such as ``3+2+1`` with its terms in non-decreasing order."""
    terms = sorted(int(part) for part in expression.strip().split("+") if part)
    return "+".join(map(str, terms))


def is_reversed(word, candidate):
    """Whether ``candidate`` is ``word`` written backwards."""
    return candidate == word[::-1]


def count_distinct_letters(text):
    """Distinct lowercase letters in a set literal such as ``{a, b, c}``.

    The closing character is not examined.
    """
    return len({char for char in text[:-1] if "a" <= char <= "z"})


def is_pangram(text):
    """Whether every Latin letter appears in ``text``, in either case."""
    letters = {char.lower() for char in text if "A" <= char <= "Z" or "a" <= char <= "z"}
    return letters >= set(ascii_lowercase)


def fix_case(word):
    """Upper-case ``word`` if most of it is upper case, otherwise lower-case it."""
    upper = sum(1 for char in word if "A" <= char <= "Z")
    return word.upper() if upper > len(word) - upper else word.lower()


def xor_strings(first, second):
    """Digit-wise comparison: ``'0'`` where the strings agree, ``'1'`` where they differ."""
    if len(second) < len(first):
        raise ValueError("second string is shorter than the first")
    return "".join("0" if a == b else "1" for a, b in zip(first, second))


def chess_winner(results):
    """Who won more games: ``Anton`` for ``A``, ``Danik`` otherwise, or ``Friendship``."""
    anton = sum(1 for result in results if result == "A")
    danik = len(results) - anton
    if anton == danik:
        return "Friendship"
    return "Anton" if anton > danik else "Danik"


def total_faces(names):
    """Total number of faces of the named polyhedra; unknown names count zero."""
    return sum(_FACES.get(name, 0) for name in names)


def _prefix_counts(text):
    counts = [0] * 26
    table = [tuple(counts)]
    for char in text:
        index = ord(char) - ord("a")
        if not 0 <= index < 26:
            raise ValueError(f"character {char!r} is not a lowercase letter")
        counts[index] += 1
        table.append(tuple(counts))
    return table


def sort_query_operations(first, second, queries):
    """For each 1-based range ``(l, r)``, the changes that make both sorted substrings equal."""
    if len(first) != len(second):
        raise ValueError("strings must have the same length")
    first_table = _prefix_counts(first)
    second_table = _prefix_counts(second)
    answers = []
    for left, right in queries:
        if not 1 <= left <= right <= len(first):
            raise ValueError(f"query ({left}, {right}) is out of range")
        difference = sum(
            abs((a_hi - a_lo) - (b_hi - b_lo))
            for a_hi, a_lo, b_hi, b_lo in zip(
                first_table[right], first_table[left - 1],
                second_table[right], second_table[left - 1],
            )
        )
        answers.append(difference // 2)
    return answers


def hulk_feelings(layers):
    """Hulk's feelings with ``layers`` alternating layers of hate and love."""
    phrases = [
        ("I love" if layer % 2 == 0 else "I hate") + (" it" if layer == layers else " that")
        for layer in range(1, layers + 1)
    ]
    return " ".join(phrases)
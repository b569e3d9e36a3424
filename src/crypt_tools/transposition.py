from typing import List

from .errors import InvalidArgument


def _effective_stride(text: str, stride: int) -> int:
    if isinstance(stride, bool) or not isinstance(stride, int):
        raise InvalidArgument(f"Stride must be an integer, got {stride!r}.")
    if stride < 1:
        raise InvalidArgument("Stride must be at least 1.")
    # A stride past the end only adds empty groups.
    return min(stride, len(text)) or 1


def block_transpose(text: str, stride: int = 3) -> str:
    """
    Deal characters round-robin into `stride` groups and join the groups.

    "Hello World" with stride 3 becomes "HlWl" + "eood" + "l r".
    """
    stride = _effective_stride(text, stride)
    return "".join(text[group::stride] for group in range(stride))


def block_transpose_inverse(text: str, stride: int = 3) -> str:
    """
    Undo block_transpose for the same stride.
    """
    stride = _effective_stride(text, stride)
    if not text:
        return text

    # The first len % stride groups hold one extra character.
    short, extra = divmod(len(text), stride)
    group_slices: List[str] = []
    start = 0
    for group in range(stride):
        end = start + short + (1 if group < extra else 0)
        group_slices.append(text[start:end])
        start = end

    plaintext_chars: List[str] = [""] * len(text)
    for group, chunk in enumerate(group_slices):
        for offset, char in enumerate(chunk):
            plaintext_chars[group + offset * stride] = char
    return "".join(plaintext_chars)


"""
輸入讀取模組

解析「站點數量 n + 以空白分隔的整數對」格式的文字串流，
範圍檢查交由 forest 處理
"""

from collections.abc import Iterable, Iterator

from unionfind.core.exceptions import InputFormatError
from unionfind.data_model import Pair


def _tokens(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """逐行切出 token，附帶行號"""
    line_iter = iter(lines)
    line_no = 0
    while True:
        try:
            line = next(line_iter)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise InputFormatError(
                f"line {line_no + 1}: input is not valid UTF-8 ({exc.reason})"
            ) from exc

        line_no += 1
        for token in line.split():
            yield line_no, token


def _parse_int(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(
            f"line {line_no}: expected an integer, got {token!r}"
        ) from None


def _pairs(tokens: Iterator[tuple[int, str]]) -> Iterator[Pair]:
    for line_no, token in tokens:
        p = _parse_int(token, line_no)
        try:
            next_line_no, next_token = next(tokens)
        except StopIteration:
            raise InputFormatError(
                f"line {line_no}: site {p} has no partner"
            ) from None
        yield p, _parse_int(next_token, next_line_no)


def read_input(lines: Iterable[str]) -> tuple[int, Iterator[Pair]]:
    """
    讀取輸入串流

    站點數量立即解析，站點對則以惰性方式逐一產生

    Args:
        lines: 文字行來源（檔案物件或字串列表）

    Returns:
        (站點數量, 站點對迭代器)

    Raises:
        InputFormatError: 串流為空或 token 不是整數
    """
    tokens = _tokens(lines)
    try:
        line_no, first = next(tokens)
    except StopIteration:
        raise InputFormatError("input is empty: expected a site count") from None

    return _parse_int(first, line_no), _pairs(tokens)


def read_text(text: str) -> tuple[int, list[Pair]]:
    """
    從字串讀取完整輸入

    Args:
        text: 輸入文字

    Returns:
        (站點數量, 站點對列表)
    """
    n, pairs = read_input(text.splitlines())
    return n, list(pairs)

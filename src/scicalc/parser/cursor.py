"""ParserCursor — позиция разбора внутри одного вызова evaluate()."""

from dataclasses import dataclass, field
from typing import Final, Optional

from scicalc.core.domain.result import ErrorKind

WHITESPACE: Final[str] = " \t\r\n\f\v"


@dataclass
class ParserCursor:
    """Транзиентное состояние разбора.

    Принадлежит ровно одному вызову evaluate() и отбрасывается после него.

    Инварианты:
    - position только растёт
    - current_char == text[position] или None (конец ввода)
    - error меняется SUCCESS → X один раз; повторный fail() не перезаписывает
    - после failed правила грамматики не читают ввод: _factor сразу
      возвращает cursor.error
    """

    text: str
    position: int = 0
    depth: int = 0
    error: ErrorKind = ErrorKind.SUCCESS
    current_char: Optional[str] = field(init=False)

    def __post_init__(self) -> None:
        self.current_char = self._char_at(self.position)

    def _char_at(self, index: int) -> Optional[str]:
        if index < len(self.text):
            return self.text[index]
        return None

    @property
    def at_end(self) -> bool:
        return self.current_char is None

    @property
    def failed(self) -> bool:
        return self.error != ErrorKind.SUCCESS

    def advance(self) -> None:
        if self.current_char is None:
            return
        self.position += 1
        self.current_char = self._char_at(self.position)

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def fail(self, kind: ErrorKind) -> ErrorKind:
        """Переход в failed; возвращает итоговую (первую) ошибку."""
        if not self.failed:
            self.error = kind
        return self.error

    def describe(self) -> str:
        """Текущий символ и позиция для сообщений об ошибке."""
        if self.current_char is None:
            return f"unexpected end of input at position {self.position}"
        return f"unexpected character {self.current_char!r} at position {self.position}"

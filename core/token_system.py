"""core/token_system.py"""
from enum import Enum
import logging
import re

from core.errors import (
    LeadingOperatorError, TrailingOperatorError,
    ConsecutiveOperatorError, InvalidSymbolError
)
from core.operators import OPERATOR_SYMBOLS
from utils.metrics import is_number

logger = logging.getLogger(__name__)

PARENTHESES = frozenset('()')

# 数字串整体匹配（修正版）与逐字符匹配（原始行为，"42" 会被拆成 "4" "2"）
NUMERIC_RUN_PATTERN = re.compile(r"[0-9.]+|[+\-*/()]")
SINGLE_CHAR_PATTERN = re.compile(r"[0-9.+\-*/()]")


class TokenType(Enum):
    NUMBER = "number"      # 数值
    OPERATOR = "operator"  # + - * /
    PAREN = "paren"        # ( )
    UNKNOWN = "unknown"    # 无法解析的数字串，如 "1.2.3"


class Token:
    def __init__(self, lexeme, position=0):
        self.lexeme = lexeme
        self.position = position
        self.is_numeric = is_number(lexeme)
        if self.is_numeric:
            self.type = TokenType.NUMBER
        elif lexeme in OPERATOR_SYMBOLS:
            self.type = TokenType.OPERATOR
        elif lexeme in PARENTHESES:
            self.type = TokenType.PAREN
        else:
            self.type = TokenType.UNKNOWN

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.lexeme, self.position) == (other.lexeme, other.position)

    def __hash__(self):
        return hash((self.lexeme, self.position))

    def __repr__(self):
        return f"Token({self.lexeme!r}, {self.type.value})"


def tokenize(text, merge_numeric_runs=True):
    """
    把输入文本切分为Token序列，空白和其他字符直接丢弃
    Args:
        text: 原始表达式
        merge_numeric_runs: True 时连续的数字/小数点合并为一个Token；
            False 时保留逐字符切分的旧行为
    Returns:
        Token列表（保持从左到右的顺序）
    """
    pattern = NUMERIC_RUN_PATTERN if merge_numeric_runs else SINGLE_CHAR_PATTERN
    lexemes = pattern.findall(text or "")
    return [Token(lexeme, position=i) for i, lexeme in enumerate(lexemes)]


class TokenValidator:

    @staticmethod
    def is_recognized(lexeme):
        """四个运算符或括号"""
        return lexeme in OPERATOR_SYMBOLS or lexeme in PARENTHESES

    @staticmethod
    def validate(tokens):
        """
        结构校验，不检查括号是否配对（由转换器负责）
        - 首个Token必须是数字或 '('
        - 其余Token必须是数字或已知符号
        - 不能以运算符结尾
        - 不能出现连续运算符
        """
        if not tokens:
            return

        first = tokens[0]
        if not first.is_numeric and first.lexeme != '(':
            raise LeadingOperatorError(first.lexeme)

        last_index = len(tokens) - 1
        for i in range(1, len(tokens)):
            token = tokens[i]
            prev = tokens[i - 1]

            if not token.is_numeric and not TokenValidator.is_recognized(token.lexeme):
                raise InvalidSymbolError(token.lexeme, i + 1)

            if token.is_operator and i == last_index:
                raise TrailingOperatorError(token.lexeme)

            if token.is_operator and prev.is_operator:
                raise ConsecutiveOperatorError(prev.lexeme, token.lexeme)

        logger.debug(f"Validated {len(tokens)} tokens")

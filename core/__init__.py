"""核心模块 - Token系统、调度场转换、RPN评估器和操作符"""
from .errors import (
    ExpressionError, StructuralError, EvaluationError,
    LeadingOperatorError, TrailingOperatorError, ConsecutiveOperatorError,
    InvalidSymbolError, UnmatchedParenthesisError,
    InsufficientOperandsError, MalformedExpressionError, UnknownOperatorError
)
from .operators import Operator, Operators, OPERATOR_SYMBOLS
from .token_system import TokenType, Token, TokenValidator, tokenize
from .shunting_yard import PostfixConverter, to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate


def compile_expression(text, merge_numeric_runs=True):
    """分词 -> 校验 -> 转后缀"""
    tokens = tokenize(text, merge_numeric_runs=merge_numeric_runs)
    TokenValidator.validate(tokens)
    return to_postfix(tokens)


def evaluate_expression(text, merge_numeric_runs=True):
    """完整流水线：文本 -> float，失败时抛出 ExpressionError 子类"""
    return evaluate(compile_expression(text, merge_numeric_runs=merge_numeric_runs))


__all__ = [
    'ExpressionError', 'StructuralError', 'EvaluationError',
    'LeadingOperatorError', 'TrailingOperatorError', 'ConsecutiveOperatorError',
    'InvalidSymbolError', 'UnmatchedParenthesisError',
    'InsufficientOperandsError', 'MalformedExpressionError', 'UnknownOperatorError',
    'Operator', 'Operators', 'OPERATOR_SYMBOLS',
    'TokenType', 'Token', 'TokenValidator', 'tokenize',
    'PostfixConverter', 'to_postfix',
    'RPNEvaluator', 'evaluate',
    'compile_expression', 'evaluate_expression'
]

"""计算器模块 - 带缓存的表达式求值和批量处理"""
from .evaluator import ExpressionEvaluator

__all__ = ['ExpressionEvaluator']

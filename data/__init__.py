"""数据模块 - 表达式加载与结果保存"""
from .data_loader import load_expressions, save_results

__all__ = ['load_expressions', 'save_results']

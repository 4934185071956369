"""工具模块"""
from .metrics import is_number, results_close, summarize_results

__all__ = ['is_number', 'results_close', 'summarize_results']

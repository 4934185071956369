import logging
from collections import OrderedDict
from typing import Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from config.config import TOKENIZER_CONFIG, EVALUATOR_CONFIG, DATA_CONFIG
from core import ExpressionError, RPNEvaluator, compile_expression

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size=None, merge_numeric_runs=None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG['cache_size']
        if merge_numeric_runs is None:
            merge_numeric_runs = TOKENIZER_CONFIG['merge_numeric_runs']
        self.rpn_evaluator = RPNEvaluator
        self.merge_numeric_runs = merge_numeric_runs
        # 使用有限大小的OrderedDict实现LRU缓存，键为原始文本
        self.cache_size = cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'max_size': self.cache_size,
        }

    def compile(self, text: str) -> Tuple[str, ...]:
        return compile_expression(text, merge_numeric_runs=self.merge_numeric_runs)

    def evaluate(self, text: str) -> float:
        """
        Args:
            text: 中缀表达式
        Returns:
            float 结果；失败时抛出 ExpressionError（失败结果不缓存）
        """
        if text in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(text)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {text[:50]}")
            return self._result_cache[text][1]

        self._cache_misses += 1
        postfix = self.compile(text)
        result = self.rpn_evaluator.evaluate(postfix)

        if self.cache_size > 0:
            self._result_cache[text] = (postfix, result)
            self._manage_cache()
        return result

    def try_evaluate(self, text: str) -> Tuple[float, Optional[str]]:
        """不抛异常的版本：失败时返回 (nan, 错误信息)"""
        try:
            return self.evaluate(text), None
        except ExpressionError as e:
            logger.warning(f"Error evaluating expression '{text[:50]}': {type(e).__name__}: {e}")
            return np.nan, f"{type(e).__name__}: {e}"

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值
        Returns:
            DataFrame，列为 expression / postfix / result / error
        """
        if isinstance(expressions, pd.Series):
            index = expressions.index
            expressions = expressions.tolist()
        else:
            expressions = list(expressions)
            index = None

        rows = []
        for text in expressions:
            text = "" if pd.isna(text) else str(text)
            value, error = self.try_evaluate(text)
            postfix = None
            if error is None:
                postfix = ' '.join(self._result_cache[text][0]) if text in self._result_cache \
                    else ' '.join(self.compile(text))
            rows.append({
                DATA_CONFIG['expression_column']: text,
                DATA_CONFIG['postfix_column']: postfix,
                DATA_CONFIG['result_column']: value,
                DATA_CONFIG['error_column']: error,
            })

        columns = [DATA_CONFIG['expression_column'], DATA_CONFIG['postfix_column'],
                   DATA_CONFIG['result_column'], DATA_CONFIG['error_column']]
        results = pd.DataFrame(rows, columns=columns, index=index)
        results[DATA_CONFIG['result_column']] = results[DATA_CONFIG['result_column']].astype(float)
        logger.info(f"Evaluated {len(results)} expressions, "
                    f"{int(results[DATA_CONFIG['error_column']].isna().sum())} succeeded")
        return results

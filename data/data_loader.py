"""数据加载和保存模块 - 批量表达式"""
import logging
import os

import pandas as pd

from config.config import DATA_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    加载待求值的表达式。

    Parameters:
    - file_path: CSV文件（按列读取）或纯文本文件（每行一个表达式，忽略空行和 # 注释）
    - expression_column: CSV中的表达式列名, 默认为 DATA_CONFIG['expression_column']

    Returns:
    - pd.Series 表达式文本
    """
    if expression_column is None:
        expression_column = DATA_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Expression file '{file_path}' not found.")

    if file_path.endswith('.csv'):
        # 表达式列按字符串读取，避免 "42" 被转成整数
        dataset = pd.read_csv(file_path, dtype={expression_column: str}, keep_default_na=False)

        if expression_column not in dataset.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in dataset.")

        expressions = dataset[expression_column].astype(str)
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        expressions = pd.Series(
            [line for line in lines if line and not line.startswith('#')],
            name=expression_column,
            dtype=object
        )

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions.rename(expression_column)


def save_results(results, output_path=None):
    """保存批量求值结果为CSV"""
    output_path = output_path or DATA_CONFIG['default_output_path']
    logger.info(f"Saving {len(results)} results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path

"""配置文件"""

# 分词参数
TOKENIZER_CONFIG = {
    # True: 连续数字/小数点合并为一个Token（"42" -> "42"）
    # False: 逐字符切分的旧行为（"42" -> "4", "2"），多位数会在求值时报错
    "merge_numeric_runs": True,
}

# 求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,
    "rel_tolerance": 1e-9,  # 结果比较的相对误差
}

# 批量数据
DATA_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "error_column": "error",
    "postfix_column": "postfix",
    "default_output_path": "expression_results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(TOKENIZER_CONFIG["merge_numeric_runs"], bool), "merge_numeric_runs必须是bool"
    assert EVALUATOR_CONFIG["cache_size"] >= 0, "cache_size不能为负"
    assert 0 < EVALUATOR_CONFIG["rel_tolerance"] < 1, "rel_tolerance应在(0, 1)之间"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR"), "未知日志级别"
    columns = [DATA_CONFIG[k] for k in ("expression_column", "result_column", "error_column", "postfix_column")]
    assert len(set(columns)) == len(columns), "列名不能重复"
    return True

"""utils/metrics.py"""
import numpy as np
import pandas as pd


def is_number(token):
    """判断词素能否解析为浮点数"""
    try:
        float(token)
        return True
    except (TypeError, ValueError):
        return False


def results_close(actual, expected, rel_tol=1e-9):
    """相对误差比较；inf 与同号 inf 视为相等，nan 与 nan 视为相等"""
    actual = np.float64(actual)
    expected = np.float64(expected)
    if np.isnan(actual) or np.isnan(expected):
        return bool(np.isnan(actual) and np.isnan(expected))
    if np.isinf(actual) or np.isinf(expected):
        return bool(actual == expected)
    return bool(np.isclose(actual, expected, rtol=rel_tol, atol=0.0))


def summarize_results(results, result_column='result', error_column='error'):
    """统计批量求值结果：总数、成功、失败、非有限值"""
    if not isinstance(results, pd.DataFrame) or results.empty:
        return {'total': 0, 'ok': 0, 'failed': 0, 'non_finite': 0}

    failed = results[error_column].notna()
    values = results.loc[~failed, result_column].astype(float)
    return {
        'total': int(len(results)),
        'ok': int((~failed).sum()),
        'failed': int(failed.sum()),
        'non_finite': int((~np.isfinite(values.to_numpy())).sum()),
    }

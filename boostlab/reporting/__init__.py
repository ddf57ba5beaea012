from .boosting_report import boosting_report, effective_n_from_weights

__all__ = ["boosting_report", "effective_n_from_weights"]

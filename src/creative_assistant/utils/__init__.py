from .timing import generate_id, measure_execution_time

__all__ = ["generate_id", "measure_execution_time"]

from pipeline.roi_runner import RoiInputs, RoiResult, run_roi, run_roi_cached

__all__ = ["RoiInputs", "RoiResult", "run_roi", "run_roi_cached"]

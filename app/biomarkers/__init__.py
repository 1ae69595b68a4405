from app.biomarkers.postprocess import post_process
from app.biomarkers.reconciler import pool_candidates, reconcile
from app.biomarkers.synonyms import standardize_name
from app.biomarkers.units import infer_unit
from app.biomarkers.values import parse_numeric

__all__ = [
    "infer_unit",
    "parse_numeric",
    "pool_candidates",
    "post_process",
    "reconcile",
    "standardize_name",
]

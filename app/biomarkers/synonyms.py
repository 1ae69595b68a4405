"""Static abbreviation/synonym lookup for canonical biomarker names."""

from collections.abc import Mapping
from types import MappingProxyType

# domain -> canonical name -> synonyms (matched case-insensitively)
_SYNONYMS_BY_DOMAIN: dict[str, dict[str, tuple[str, ...]]] = {
    "hematology": {
        "Hemoglobin": ("hb", "hgb", "haemoglobin"),
        "Hematocrit": ("hct", "pcv", "packed cell volume", "haematocrit"),
        "White Blood Cells": ("wbc", "total leukocyte count", "tlc", "leukocytes", "white cell count"),
        "Red Blood Cells": ("rbc", "erythrocytes", "red cell count", "total rbc count"),
        "Platelets": ("plt", "platelet count", "thrombocytes"),
        "Mean Corpuscular Volume": ("mcv",),
        "Mean Corpuscular Hemoglobin": ("mch",),
        "Mean Corpuscular Hemoglobin Concentration": ("mchc",),
        "Red Cell Distribution Width": ("rdw", "rdw-cv"),
        "Mean Platelet Volume": ("mpv",),
        "Neutrophils": ("neut", "polymorphs", "segmented neutrophils"),
        "Lymphocytes": ("lymph", "lymphs"),
        "Monocytes": ("mono", "monos"),
        "Eosinophils": ("eos", "eosino"),
        "Basophils": ("baso", "basos"),
        "Erythrocyte Sedimentation Rate": ("esr", "sed rate"),
    },
    "chemistry": {
        "Glucose": ("glu", "blood sugar", "blood glucose"),
        "Fasting Glucose": ("fbs", "fbg", "fasting blood sugar", "fasting plasma glucose", "fpg"),
        "Blood Urea Nitrogen": ("bun", "urea nitrogen"),
        "Creatinine": ("creat", "cr", "serum creatinine"),
        "Estimated Glomerular Filtration Rate": ("egfr", "gfr"),
        "Uric Acid": ("ua", "serum uric acid"),
        "Sodium": ("na", "na+", "serum sodium"),
        "Potassium": ("k", "k+", "serum potassium"),
        "Chloride": ("cl", "cl-"),
        "Bicarbonate": ("hco3", "co2", "total co2"),
        "Calcium": ("ca", "serum calcium"),
        "Total Cholesterol": ("tc", "chol", "cholesterol", "cholesterol total"),
        "LDL Cholesterol": ("ldl", "ldl-c", "ldl cholesterol direct"),
        "HDL Cholesterol": ("hdl", "hdl-c"),
        "Triglycerides": ("tg", "trig", "triglyceride"),
        "Vitamin D": ("vit d", "25-oh vitamin d", "25-hydroxy vitamin d", "vitamin d3"),
        "Vitamin B12": ("b12", "vit b12", "cobalamin", "cyanocobalamin"),
        "Ferritin": ("serum ferritin",),
        "Iron": ("fe", "serum iron"),
        "Total Iron Binding Capacity": ("tibc",),
    },
    "liver function": {
        "Alanine Aminotransferase": ("alt", "sgpt", "alt (sgpt)"),
        "Aspartate Aminotransferase": ("ast", "sgot", "ast (sgot)"),
        "Alkaline Phosphatase": ("alp", "alk phos"),
        "Gamma-Glutamyl Transferase": ("ggt", "gamma gt", "ggtp"),
        "Total Bilirubin": ("tbil", "bilirubin total", "t. bilirubin"),
        "Direct Bilirubin": ("dbil", "bilirubin direct", "conjugated bilirubin"),
        "Albumin": ("alb", "serum albumin"),
        "Total Protein": ("tp", "protein total", "serum protein"),
    },
    "thyroid": {
        "Thyroid Stimulating Hormone": ("tsh", "thyrotropin"),
        "Free T4": ("ft4", "free thyroxine"),
        "Free T3": ("ft3", "free triiodothyronine"),
        "Total T4": ("t4", "thyroxine"),
        "Total T3": ("t3", "triiodothyronine"),
    },
    "cardiac": {
        "Troponin I": ("tni", "ctni", "cardiac troponin i"),
        "Troponin T": ("tnt", "ctnt", "cardiac troponin t"),
        "Creatine Kinase": ("ck", "cpk"),
        "Creatine Kinase MB": ("ck-mb", "ckmb"),
        "B-type Natriuretic Peptide": ("bnp",),
        "NT-proBNP": ("nt-pro bnp", "n-terminal pro bnp"),
    },
    "inflammatory": {
        "C-Reactive Protein": ("crp",),
        "High-Sensitivity C-Reactive Protein": ("hs-crp", "hscrp", "hs crp"),
        "Procalcitonin": ("pct",),
        "Interleukin-6": ("il-6", "il6"),
    },
    "diabetes": {
        "Hemoglobin A1c": ("hba1c", "a1c", "glycated hemoglobin", "glycosylated hemoglobin"),
        "Insulin": ("fasting insulin", "serum insulin"),
        "C-Peptide": ("c peptide",),
        "HOMA-IR": ("homa ir",),
    },
}


def _build_lookup() -> Mapping[str, str]:
    lookup: dict[str, str] = {}
    for canonical_names in _SYNONYMS_BY_DOMAIN.values():
        for canonical, synonyms in canonical_names.items():
            lookup[canonical.lower()] = canonical
            for synonym in synonyms:
                lookup[synonym.lower()] = canonical
    return MappingProxyType(lookup)


SYNONYM_LOOKUP: Mapping[str, str] = _build_lookup()


def standardize_name(name: str) -> str:
    """Return the canonical biomarker name, or *name* unchanged on a miss.

    Matching is exact on the trimmed, lower-cased whole string.
    """
    return SYNONYM_LOOKUP.get(name.strip().lower(), name)

# ============================================================================
# src/ancora_matching/constants/disease_codes.py
# ============================================================================
"""
Disease Category Code Table
- Maps Condition codes to the Ancora "type_of_disease"

Layout: disease -> coding system -> list of codes.
A code must belong to a single disease; duplicates are reported when the
reverse index is built and the first registration is kept.
"""

from typing import Dict, List

from .criteria import DiseaseType
from .systems import ICD_10_SYSTEM, SNOMED_CT_SYSTEM


ANCORA_DISEASE_CODES: Dict[DiseaseType, Dict[str, List[str]]] = {
    DiseaseType.BREAST_CANCER: {
        SNOMED_CT_SYSTEM: [
            "254837009",   # Malignant neoplasm of breast
            "372064008",   # Malignant neoplasm of female breast
            "408643008",   # Infiltrating duct carcinoma of breast
            "278054005",   # Infiltrating lobular carcinoma of breast
            "706970001",   # Inflammatory carcinoma of breast
            "109889007",   # Intraductal carcinoma in situ of breast
            "109888004",   # Lobular carcinoma in situ of breast
        ],
        ICD_10_SYSTEM: [
            "C50.911", "C50.912", "C50.919", "C50.411", "C50.412",
            "C50.811", "C50.812", "C50.921", "C50.922", "C50.929",
            "D05.00", "D05.01", "D05.02", "D05.10", "D05.11", "D05.12",
        ],
    },
    DiseaseType.CERVICAL_CANCER: {
        SNOMED_CT_SYSTEM: [
            "363354003",   # Malignant tumor of cervix
            "285432005",   # Squamous cell carcinoma of cervix
            "254888000",   # Adenocarcinoma of cervix
            "254891000",   # Adenosquamous carcinoma of cervix
        ],
        ICD_10_SYSTEM: ["C53.0", "C53.1", "C53.8", "C53.9"],
    },
    DiseaseType.LUNG_CANCER: {
        SNOMED_CT_SYSTEM: [
            "363358000",   # Malignant tumor of lung
            "93880001",    # Primary malignant neoplasm of lung
            "254637007",   # Non-small cell lung cancer
            "254632001",   # Small cell carcinoma of lung
            "254626006",   # Adenocarcinoma of lung
            "254634000",   # Squamous cell carcinoma of lung
            "254629004",   # Large cell carcinoma of lung
            "424132000",   # Non-small cell carcinoma of lung, TNM stage 1
        ],
        ICD_10_SYSTEM: [
            "C34.10", "C34.11", "C34.12", "C34.2", "C34.30", "C34.31",
            "C34.32", "C34.90", "C34.91", "C34.92",
        ],
    },
    DiseaseType.MELANOMA: {
        SNOMED_CT_SYSTEM: [
            "372244006",   # Malignant melanoma
            "93655004",    # Primary malignant melanoma of skin
            "722681000",   # Primary malignant melanoma of mucosa
            "274087000",   # Malignant melanoma of eye
        ],
        ICD_10_SYSTEM: ["C43.9", "C43.4", "C43.59", "C43.70", "C69.90"],
    },
    DiseaseType.COLORECTAL_CANCER: {
        SNOMED_CT_SYSTEM: [
            "363406005",   # Malignant tumor of colon
            "363351006",   # Malignant tumor of rectum
            "93761005",    # Primary malignant neoplasm of colon
            "408645001",   # Adenocarcinoma of colon
            "254582000",   # Adenocarcinoma of rectum
        ],
        ICD_10_SYSTEM: ["C18.0", "C18.2", "C18.7", "C18.9", "C19", "C20"],
    },
    DiseaseType.KIDNEY_CANCER: {
        SNOMED_CT_SYSTEM: [
            "363518003",   # Malignant tumor of kidney
            "702391001",   # Renal cell carcinoma
            "93849006",    # Primary malignant neoplasm of kidney
        ],
        ICD_10_SYSTEM: ["C64.1", "C64.2", "C64.9"],
    },
    DiseaseType.PROSTATE_CANCER: {
        SNOMED_CT_SYSTEM: [
            "399068003",   # Malignant tumor of prostate
            "254900004",   # Carcinoma of prostate
            "445848006",   # Castration resistant prostate cancer
        ],
        ICD_10_SYSTEM: ["C61"],
    },
    DiseaseType.LIVER_CANCER: {
        SNOMED_CT_SYSTEM: [
            "93870000",    # Malignant neoplasm of liver
            "25370001",    # Hepatocellular carcinoma
            "94381002",    # Secondary malignant neoplasm of liver
        ],
        ICD_10_SYSTEM: ["C22.0", "C22.8", "C22.9", "C78.7"],
    },
    DiseaseType.PANCREATIC_CANCER: {
        SNOMED_CT_SYSTEM: [
            "363418001",   # Malignant tumor of pancreas
            "372142002",   # Carcinoma of pancreas
            "700423003",   # Adenocarcinoma of pancreas
            "716654004",   # Pancreatic neuroendocrine tumor
            "235966004",   # Acinar cell carcinoma of pancreas
        ],
        ICD_10_SYSTEM: ["C25.0", "C25.1", "C25.4", "C25.9"],
    },
    DiseaseType.CHOLANGIOCARCINOMA: {
        SNOMED_CT_SYSTEM: [
            "70179006",    # Cholangiocarcinoma
            "312104005",   # Cholangiocarcinoma of intrahepatic bile duct
            "4079001000004105",  # Perihilar cholangiocarcinoma
            "4079101000004106",  # Distal cholangiocarcinoma
            "423600009",   # Combined hepatocellular and cholangiocarcinoma
            "363353009",   # Malignant tumor of gallbladder
        ],
        ICD_10_SYSTEM: ["C22.1", "C23", "C24.0", "C24.1", "C24.9"],
    },
    DiseaseType.ESOPHAGEAL_CANCER: {
        SNOMED_CT_SYSTEM: [
            "363402007",   # Malignant tumor of esophagus
            "276803003",   # Adenocarcinoma of esophagus
        ],
        ICD_10_SYSTEM: ["C15.3", "C15.4", "C15.5", "C15.9"],
    },
    DiseaseType.GASTRIC_CANCER: {
        SNOMED_CT_SYSTEM: [
            "363349007",   # Malignant tumor of stomach
            "372143007",   # Carcinoma of stomach
        ],
        ICD_10_SYSTEM: ["C16.0", "C16.9"],
    },
    DiseaseType.ACUTE_MYELOID_LEUKEMIA: {
        SNOMED_CT_SYSTEM: [
            "91861009",    # Acute myeloid leukemia
            "17788007",    # Acute myeloid leukemia, NOS
            "110004001",   # Acute promyelocytic leukemia
            "413442001",   # AML with recurrent genetic abnormality
            "110005000",   # AML with t(8;21)
            "426642002",   # AML with multilineage dysplasia
            "427642009",   # Therapy-related AML
            "19955001",    # Myeloid sarcoma
            "1162926004",  # Myeloid leukemia associated with Down syndrome
        ],
        ICD_10_SYSTEM: [
            "C92.00", "C92.01", "C92.02", "C92.30",
            "C92.40", "C92.41", "C92.42", "C92.A0",
        ],
    },
    DiseaseType.MYELOMA: {
        SNOMED_CT_SYSTEM: [
            "109989006",   # Multiple myeloma
            "447656001",   # Smoldering multiple myeloma
            "401156007",   # Light chain myeloma
            "94705007",    # Non-secretory myeloma
            "77530008",    # Monoclonal gammopathy of undetermined significance
        ],
        ICD_10_SYSTEM: ["C90.00", "C90.01", "C90.02", "D47.2"],
    },
}

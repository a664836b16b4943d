# ============================================================================
# src/ancora_matching/constants/criteria.py
# ============================================================================
"""
Ancora Criteria and Disease Types
- Boolean criterion flags
- Numeric criteria
- Disease categories used to route a query
"""

from enum import Enum


class CriterionFlag(str, Enum):
    """
    Boolean criteria accepted in the "criterions" object of a query.
    The enum value is the JSON key sent to Ancora.
    """
    # Biomarkers
    EGFR = "egfr"
    KRAS = "kras"
    ALK = "alk"
    BRAF = "braf"
    ROS1 = "ros1"
    MSI = "msi"
    NRAS = "nras"
    FGFR2 = "fgfr2"
    IDH1 = "idh1"
    IDH2 = "idh2"
    FLT3_ITD = "flt3_itd"
    FLT3_TKD = "flt3_tkd"
    HRAS = "hras"
    HER2 = "her2"
    ER = "er"
    PR = "pr"
    BRCA1 = "brca1"
    BRCA2 = "brca2"
    HPV_18 = "hpv_18"
    HPV_16 = "hpv_16"

    # Metastases / CNS involvement
    BRAIN_METASTASES = "brain_metastases"
    CONTROLLED_BRAIN_METASTASES = "controlled_brain_metastases"
    UNCONTROLLED_BRAIN_METASTASES = "uncontrolled_brain_metastases"
    CNS_LEUKEMIA = "cns_leukemia"

    # Hematologic treatment stage
    UNTREATED = "untreated"
    IN_TREATMENT = "in_treatment"
    REMISSION = "remission"
    RELAPSED = "relapsed"

    # Histologic subtypes
    NSCLC = "nsclc"
    SCLC = "sclc"
    LUNG_LARGE_CELL_CARCINOMA = "lung_large_cell_carcinoma"
    LUNG_SQUAMOUS_CELL_CARCINOMA = "lung_squamous_cell_carcinoma"
    CERVICAL_SQUAMOUS_CELL_CARCINOMA = "cervical_squamous_cell_carcinoma"
    CERVICAL_ADENOCARCINOMA = "cervical_adenocarcinoma"
    LUNG_ADENOCARCINOMA = "lung_adenocarcinoma"
    PANCREATIC_ADENOCARCINOMA = "pancreatic_adenocarcinoma"
    CRC_SQUAMOUS = "crc_squamous"
    CERVICAL_ADENOSQUAMOUS_CARCINOMA = "cervical_adenosquamous_carcinoma"
    CRC_ADENOCARCINOMA = "crc_adenocarcinoma"
    CRC_CARCINOID = "crc_carcinoid"
    CRC_LYMPHOMA = "crc_lymphoma"
    CRC_NEUROENDOCRINE = "crc_neuroendocrine"
    MELANOMA_CUTANEOUS = "melanoma_cutaneous"
    MELANOMA_MUCOSAL = "melanoma_mucosal"
    MELANOMA_OCULAR = "melanoma_ocular"
    INTRAHEPATIC_CHOLANGIOCARCINOMA = "intrahepatic_cholangiocarcinoma"
    PERIHILAR_CHOLANGIOCARCINOMA = "perihilar_cholangiocarcinoma"
    DISTAL_CHOLANGIOCARCINOMA = "distal_cholangiocarcinoma"
    MIXED_HEPATOCELLULAR_CHOLANGIOCARCINOMA = "mixed_hepatocellular_cholangiocarcinoma"
    GALLBLADDER_CANCER = "gallbladder_cancer"
    PROSTATE_CRPC = "prostate_crpc"
    BREAST_DCIS = "breast_dcis"
    BREAST_LCIS = "breast_lcis"
    BREAST_IBC = "breast_ibc"
    BREAST_IDC = "breast_idc"
    BREAST_ILC = "breast_ilc"
    PRIMARY_LIVER_CANCER = "primary_liver_cancer"
    SECONDARY_LIVER_CANCER = "secondary_liver_cancer"
    PANCREATIC_ENDOCRINE = "pancreatic_endocrine"
    PANCREATIC_EXOCRINE = "pancreatic_exocrine"
    AML_GENETIC_ABNORMALITIES = "aml_genetic_abnormalities"
    AML_ACUTE_PROMYELOCYTIC_LEUKEMIA = "aml_acute_promyelocytic_leukemia"
    AML_MYELODYSPLASIA = "aml_myelodysplasia"
    AML_THERAPY_RELATED = "aml_therapy_related"
    AML_MYELOID_SARCOMA = "aml_myeloid_sarcoma"
    AML_DOWN_SYNDROME = "aml_down_syndrome"
    AML_NOS = "aml_nos"
    MM_MGUS = "mm_mgus"
    MM_SMOLDERING_MYELOMA = "mm_smoldering_myeloma"
    MM_LIGHT_CHAIN_MYELOMA = "mm_light_chain_myeloma"
    MM_NON_SECRETORY_MYELOMA = "mm_non_secretory_myeloma"
    MM_TYPICAL_MYELOMA = "mm_typical_myeloma"

    # Comorbidities and patient status
    PREGNANT_NURSING = "pregnant_nursing"
    ALLERGIES_TO_MEDICATION = "allergies_to_medication"
    HIV = "hiv"
    LIVER_DISEASES = "liver_diseases"
    CARDIAC_DISORDERS = "cardiac_disorders"
    KIDNEY_DISEASES = "kidney_diseases"
    DIABETES = "diabetes"
    POSTMENOPAUSAL = "postmenopausal"
    PREMENOPAUSAL = "premenopausal"
    HPV_VACCINATION = "hpv_vaccination"

    # Prior treatment
    CHEMOTHERAPY = "chemotherapy"
    HORMONAL_THERAPY = "hormonal_therapy"
    RADIATION_THERAPY = "radiation_therapy"
    MAJOR_SURGERY = "major_surgery"
    IMMUNOTHERAPY = "immunotherapy"
    BRAF_THERAPY = "braf_therapy"
    MEK_THERAPY = "mek_therapy"
    ORCHIECTOMY = "orchiectomy"
    LHRH_AGONISTS = "lhrh_agonists"
    LHRH_ANTAGONISTS = "lhrh_antagonists"
    AD_THERAPY = "ad_therapy"
    ANTIANDROGENS = "antiandrogens"
    PROSTATE_HORMONAL_THERAPY = "prostate_hormonal_therapy"
    PROTEASOME_INHIBITORS = "proteasome_inhibitors"
    IMMUNOMODULATORS = "immunomodulators"
    CORTICOSTEROIDS = "corticosteroids"
    ALLOGENEIC_HSCT = "allogeneic_hematopoietic_stem_cell_transplantation"
    AUTOLOGOUS_HSCT = "autologous_hematopoietic_stem_cell_transplantation"


class NumericCriterion(str, Enum):
    """Criteria carried as integers rather than booleans"""
    AGE = "age"
    TUMOR_SIZE = "tumor_size"    # cm, 0-35
    TUMOR_STAGE = "tumor_stage"  # 0-4
    PSA = "psa"                  # 0-100
    KARNOFSKY = "karnofsky"      # 10-100
    ECOG = "ecog"                # 0-4


class NatalSex(str, Enum):
    MALE = "male"
    FEMALE = "female"


NATAL_SEX_KEY = "natal_sex"


class DiseaseType(str, Enum):
    """
    Disease categories ("type_of_disease") understood by Ancora.
    Every query must carry exactly one.
    """
    BREAST_CANCER = "breast_cancer"
    CERVICAL_CANCER = "cervical_cancer"
    LUNG_CANCER = "lung_cancer"
    MELANOMA = "melanoma"
    COLORECTAL_CANCER = "colorectal_cancer"
    KIDNEY_CANCER = "kidney_cancer"
    PROSTATE_CANCER = "prostate_cancer"
    LIVER_CANCER = "liver_cancer"
    PANCREATIC_CANCER = "pancreatic_cancer"
    CHOLANGIOCARCINOMA = "cholangiocarcinoma"
    ESOPHAGEAL_CANCER = "esophageal_cancer"
    GASTRIC_CANCER = "gastric_cancer"
    ACUTE_MYELOID_LEUKEMIA = "acute_myeloid_leukemia"
    MYELOMA = "myeloma"

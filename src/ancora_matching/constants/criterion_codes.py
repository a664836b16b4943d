# ============================================================================
# src/ancora_matching/constants/criterion_codes.py
# ============================================================================
"""
Criterion Flag Code Table
- Maps each boolean Ancora criterion to the codes that indicate it
- Hand-curated; one code may appear under several flags

Layout: flag -> coding system -> list of codes.
Observations use these codes for the biomarker being tested (the result is
read from the value), everything else sets the flag to true when present.
"""

from typing import Dict, List

from .criteria import CriterionFlag
from .systems import ICD_10_SYSTEM, LOINC_SYSTEM, RX_NORM_SYSTEM, SNOMED_CT_SYSTEM


ANCORA_CRITERION_CODES: Dict[CriterionFlag, Dict[str, List[str]]] = {
    # ------------------------------------------------------------------
    # Biomarkers (primary code of a tumor marker Observation)
    # ------------------------------------------------------------------
    CriterionFlag.EGFR: {
        LOINC_SYSTEM: ["21659-7", "55771-0", "41103-3", "81737-9"],
        SNOMED_CT_SYSTEM: ["445200004"],
    },
    CriterionFlag.KRAS: {
        LOINC_SYSTEM: ["21702-5", "53930-4", "82535-6"],
        SNOMED_CT_SYSTEM: ["1255079007"],
    },
    CriterionFlag.ALK: {
        LOINC_SYSTEM: ["46993-2", "78205-2"],
    },
    CriterionFlag.BRAF: {
        LOINC_SYSTEM: ["58415-6", "53844-7", "62862-8"],
    },
    CriterionFlag.ROS1: {
        LOINC_SYSTEM: ["46994-0", "78206-0"],
    },
    CriterionFlag.MSI: {
        LOINC_SYSTEM: ["43368-0", "81695-9"],
        SNOMED_CT_SYSTEM: ["441762005"],
    },
    CriterionFlag.NRAS: {
        LOINC_SYSTEM: ["53931-2", "82536-4"],
    },
    CriterionFlag.FGFR2: {
        LOINC_SYSTEM: ["81786-6"],
    },
    CriterionFlag.IDH1: {
        LOINC_SYSTEM: ["82564-6", "94216-9"],
    },
    CriterionFlag.IDH2: {
        LOINC_SYSTEM: ["82565-3", "94217-7"],
    },
    CriterionFlag.FLT3_ITD: {
        LOINC_SYSTEM: ["98489-8", "54447-8"],
    },
    CriterionFlag.FLT3_TKD: {
        LOINC_SYSTEM: ["54448-6"],
    },
    CriterionFlag.HRAS: {
        LOINC_SYSTEM: ["81700-7"],
    },
    CriterionFlag.HER2: {
        LOINC_SYSTEM: ["85319-2", "85318-4", "48676-1", "18474-7", "72383-3"],
        SNOMED_CT_SYSTEM: ["431396003"],
    },
    CriterionFlag.ER: {
        LOINC_SYSTEM: ["85337-4", "16112-5", "40556-3"],
        SNOMED_CT_SYSTEM: ["416053008"],
    },
    CriterionFlag.PR: {
        LOINC_SYSTEM: ["85339-0", "16113-3", "40557-1"],
        SNOMED_CT_SYSTEM: ["416561008"],
    },
    CriterionFlag.BRCA1: {
        LOINC_SYSTEM: ["21636-5", "38531-0"],
        SNOMED_CT_SYSTEM: ["412734009"],
    },
    CriterionFlag.BRCA2: {
        LOINC_SYSTEM: ["21637-3", "38530-2"],
        SNOMED_CT_SYSTEM: ["412738007"],
    },
    CriterionFlag.HPV_18: {
        LOINC_SYSTEM: ["59263-4", "69002-4"],
    },
    CriterionFlag.HPV_16: {
        LOINC_SYSTEM: ["59420-0", "61372-9"],
    },

    # ------------------------------------------------------------------
    # Metastases / CNS involvement
    # ------------------------------------------------------------------
    CriterionFlag.BRAIN_METASTASES: {
        SNOMED_CT_SYSTEM: ["94225005", "428061005"],
        ICD_10_SYSTEM: ["C79.31"],
    },
    CriterionFlag.CONTROLLED_BRAIN_METASTASES: {
        SNOMED_CT_SYSTEM: ["428061005"],
    },
    CriterionFlag.UNCONTROLLED_BRAIN_METASTASES: {
        SNOMED_CT_SYSTEM: ["94225005"],
    },
    CriterionFlag.CNS_LEUKEMIA: {
        SNOMED_CT_SYSTEM: ["277567002"],
    },

    # ------------------------------------------------------------------
    # Hematologic treatment stage (ICD-10 fifth character)
    # ------------------------------------------------------------------
    CriterionFlag.UNTREATED: {
        ICD_10_SYSTEM: ["C92.00", "C90.00"],
    },
    CriterionFlag.REMISSION: {
        ICD_10_SYSTEM: ["C92.01", "C90.01", "C92.41"],
        SNOMED_CT_SYSTEM: ["285839005"],
    },
    CriterionFlag.RELAPSED: {
        ICD_10_SYSTEM: ["C92.02", "C90.02", "C92.42"],
        SNOMED_CT_SYSTEM: ["277022003"],
    },
    CriterionFlag.IN_TREATMENT: {
        SNOMED_CT_SYSTEM: ["385656007"],
    },

    # ------------------------------------------------------------------
    # Lung histology
    # ------------------------------------------------------------------
    CriterionFlag.NSCLC: {
        SNOMED_CT_SYSTEM: [
            "254637007", "254626006", "254634000", "254629004",
            "424132000",
        ],
    },
    CriterionFlag.SCLC: {
        SNOMED_CT_SYSTEM: ["254632001", "1385001"],
    },
    CriterionFlag.LUNG_ADENOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["254626006"],
    },
    CriterionFlag.LUNG_SQUAMOUS_CELL_CARCINOMA: {
        SNOMED_CT_SYSTEM: ["254634000"],
    },
    CriterionFlag.LUNG_LARGE_CELL_CARCINOMA: {
        SNOMED_CT_SYSTEM: ["254629004"],
    },

    # ------------------------------------------------------------------
    # Cervical histology
    # ------------------------------------------------------------------
    CriterionFlag.CERVICAL_SQUAMOUS_CELL_CARCINOMA: {
        SNOMED_CT_SYSTEM: ["285432005"],
    },
    CriterionFlag.CERVICAL_ADENOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["254888000"],
    },
    CriterionFlag.CERVICAL_ADENOSQUAMOUS_CARCINOMA: {
        SNOMED_CT_SYSTEM: ["254891000"],
    },

    # ------------------------------------------------------------------
    # Colorectal histology
    # ------------------------------------------------------------------
    CriterionFlag.CRC_ADENOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["408645001", "254582000"],
    },
    CriterionFlag.CRC_SQUAMOUS: {
        SNOMED_CT_SYSTEM: ["447886005"],
    },
    CriterionFlag.CRC_CARCINOID: {
        SNOMED_CT_SYSTEM: ["716656002"],
    },
    CriterionFlag.CRC_LYMPHOMA: {
        SNOMED_CT_SYSTEM: ["450887006"],
    },
    CriterionFlag.CRC_NEUROENDOCRINE: {
        SNOMED_CT_SYSTEM: ["1163078009"],
    },

    # ------------------------------------------------------------------
    # Melanoma subtype
    # ------------------------------------------------------------------
    CriterionFlag.MELANOMA_CUTANEOUS: {
        SNOMED_CT_SYSTEM: ["93655004"],
        ICD_10_SYSTEM: ["C43.9"],
    },
    CriterionFlag.MELANOMA_MUCOSAL: {
        SNOMED_CT_SYSTEM: ["722681000"],
    },
    CriterionFlag.MELANOMA_OCULAR: {
        SNOMED_CT_SYSTEM: ["274087000"],
        ICD_10_SYSTEM: ["C69.90"],
    },

    # ------------------------------------------------------------------
    # Biliary / liver
    # ------------------------------------------------------------------
    CriterionFlag.INTRAHEPATIC_CHOLANGIOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["312104005"],
        ICD_10_SYSTEM: ["C22.1"],
    },
    CriterionFlag.PERIHILAR_CHOLANGIOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["4079001000004105"],
    },
    CriterionFlag.DISTAL_CHOLANGIOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["4079101000004106"],
        ICD_10_SYSTEM: ["C24.0"],
    },
    CriterionFlag.MIXED_HEPATOCELLULAR_CHOLANGIOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["423600009"],
    },
    CriterionFlag.GALLBLADDER_CANCER: {
        SNOMED_CT_SYSTEM: ["363353009"],
        ICD_10_SYSTEM: ["C23"],
    },
    CriterionFlag.PRIMARY_LIVER_CANCER: {
        SNOMED_CT_SYSTEM: ["93870000", "25370001"],
        ICD_10_SYSTEM: ["C22.0", "C22.8"],
    },
    CriterionFlag.SECONDARY_LIVER_CANCER: {
        SNOMED_CT_SYSTEM: ["94381002"],
        ICD_10_SYSTEM: ["C78.7"],
    },

    # ------------------------------------------------------------------
    # Prostate
    # ------------------------------------------------------------------
    CriterionFlag.PROSTATE_CRPC: {
        SNOMED_CT_SYSTEM: ["445848006"],
        ICD_10_SYSTEM: ["Z19.2"],
    },

    # ------------------------------------------------------------------
    # Breast histology
    # ------------------------------------------------------------------
    CriterionFlag.BREAST_DCIS: {
        SNOMED_CT_SYSTEM: ["109889007"],
        ICD_10_SYSTEM: ["D05.10", "D05.11", "D05.12"],
    },
    CriterionFlag.BREAST_LCIS: {
        SNOMED_CT_SYSTEM: ["109888004"],
        ICD_10_SYSTEM: ["D05.00", "D05.01", "D05.02"],
    },
    CriterionFlag.BREAST_IBC: {
        SNOMED_CT_SYSTEM: ["706970001"],
    },
    CriterionFlag.BREAST_IDC: {
        SNOMED_CT_SYSTEM: ["408643008"],
    },
    CriterionFlag.BREAST_ILC: {
        SNOMED_CT_SYSTEM: ["278054005"],
    },

    # ------------------------------------------------------------------
    # Pancreas
    # ------------------------------------------------------------------
    CriterionFlag.PANCREATIC_ADENOCARCINOMA: {
        SNOMED_CT_SYSTEM: ["700423003"],
    },
    CriterionFlag.PANCREATIC_ENDOCRINE: {
        SNOMED_CT_SYSTEM: ["716654004"],
        ICD_10_SYSTEM: ["C25.4"],
    },
    CriterionFlag.PANCREATIC_EXOCRINE: {
        SNOMED_CT_SYSTEM: ["700423003", "235966004"],
    },

    # ------------------------------------------------------------------
    # Acute myeloid leukemia subtype
    # ------------------------------------------------------------------
    CriterionFlag.AML_GENETIC_ABNORMALITIES: {
        SNOMED_CT_SYSTEM: ["413442001", "110005000"],
    },
    CriterionFlag.AML_ACUTE_PROMYELOCYTIC_LEUKEMIA: {
        SNOMED_CT_SYSTEM: ["110004001"],
        ICD_10_SYSTEM: ["C92.40", "C92.41", "C92.42"],
    },
    CriterionFlag.AML_MYELODYSPLASIA: {
        SNOMED_CT_SYSTEM: ["426642002"],
    },
    CriterionFlag.AML_THERAPY_RELATED: {
        SNOMED_CT_SYSTEM: ["427642009"],
    },
    CriterionFlag.AML_MYELOID_SARCOMA: {
        SNOMED_CT_SYSTEM: ["19955001"],
        ICD_10_SYSTEM: ["C92.30"],
    },
    CriterionFlag.AML_DOWN_SYNDROME: {
        SNOMED_CT_SYSTEM: ["1162926004"],
    },
    CriterionFlag.AML_NOS: {
        SNOMED_CT_SYSTEM: ["17788007"],
    },

    # ------------------------------------------------------------------
    # Multiple myeloma subtype
    # ------------------------------------------------------------------
    CriterionFlag.MM_MGUS: {
        SNOMED_CT_SYSTEM: ["77530008"],
        ICD_10_SYSTEM: ["D47.2"],
    },
    CriterionFlag.MM_SMOLDERING_MYELOMA: {
        SNOMED_CT_SYSTEM: ["447656001"],
    },
    CriterionFlag.MM_LIGHT_CHAIN_MYELOMA: {
        SNOMED_CT_SYSTEM: ["401156007"],
    },
    CriterionFlag.MM_NON_SECRETORY_MYELOMA: {
        SNOMED_CT_SYSTEM: ["94705007"],
    },
    CriterionFlag.MM_TYPICAL_MYELOMA: {
        SNOMED_CT_SYSTEM: ["109989006"],
    },

    # ------------------------------------------------------------------
    # Comorbidities and patient status
    # ------------------------------------------------------------------
    CriterionFlag.PREGNANT_NURSING: {
        SNOMED_CT_SYSTEM: ["77386006", "169741004"],
        ICD_10_SYSTEM: ["Z33.1", "Z39.1"],
    },
    CriterionFlag.ALLERGIES_TO_MEDICATION: {
        SNOMED_CT_SYSTEM: ["416098002", "419511003"],
        ICD_10_SYSTEM: ["Z88.0", "Z88.9"],
    },
    CriterionFlag.HIV: {
        SNOMED_CT_SYSTEM: ["86406008", "165816005"],
        ICD_10_SYSTEM: ["B20", "Z21"],
    },
    CriterionFlag.LIVER_DISEASES: {
        SNOMED_CT_SYSTEM: ["235856003", "19943007", "197321007"],
        ICD_10_SYSTEM: ["K74.60", "K76.9", "K76.0"],
    },
    CriterionFlag.CARDIAC_DISORDERS: {
        SNOMED_CT_SYSTEM: ["56265001", "84114007", "49436004", "53741008"],
        ICD_10_SYSTEM: ["I50.9", "I25.10", "I48.91"],
    },
    CriterionFlag.KIDNEY_DISEASES: {
        SNOMED_CT_SYSTEM: ["90708001", "709044004", "46177005"],
        ICD_10_SYSTEM: ["N18.9", "N18.6", "N28.9"],
    },
    CriterionFlag.DIABETES: {
        SNOMED_CT_SYSTEM: ["73211009", "44054006", "46635009"],
        ICD_10_SYSTEM: ["E11.9", "E10.9", "E11.65"],
    },
    CriterionFlag.POSTMENOPAUSAL: {
        SNOMED_CT_SYSTEM: ["76498008"],
        ICD_10_SYSTEM: ["Z78.0"],
    },
    CriterionFlag.PREMENOPAUSAL: {
        SNOMED_CT_SYSTEM: ["289903006"],
    },
    CriterionFlag.HPV_VACCINATION: {
        SNOMED_CT_SYSTEM: ["428570002", "761841000"],
    },

    # ------------------------------------------------------------------
    # Prior treatment: medications (RxNorm ingredients) and procedures
    # ------------------------------------------------------------------
    CriterionFlag.CHEMOTHERAPY: {
        RX_NORM_SYSTEM: [
            "2555",      # cisplatin
            "40048",     # carboplatin
            "56946",     # paclitaxel
            "72962",     # docetaxel
            "3639",      # doxorubicin
            "3002",      # cyclophosphamide
            "4492",      # fluorouracil
            "12574",     # gemcitabine
            "32592",     # oxaliplatin
            "194000",    # capecitabine
            "51499",     # irinotecan
            "4179",      # etoposide
            "3041",      # cytarabine
            "3995",      # daunorubicin
            "1989",      # melphalan
        ],
        SNOMED_CT_SYSTEM: ["367336001", "265760000"],
    },
    CriterionFlag.HORMONAL_THERAPY: {
        RX_NORM_SYSTEM: [
            "10324",     # tamoxifen
            "72965",     # letrozole
            "84857",     # anastrozole
            "258494",    # exemestane
            "282357",    # fulvestrant
        ],
        SNOMED_CT_SYSTEM: ["169413002"],
    },
    CriterionFlag.RADIATION_THERAPY: {
        SNOMED_CT_SYSTEM: [
            "108290001", "33195004", "152198000", "447759004",
            "385798007",
        ],
    },
    CriterionFlag.MAJOR_SURGERY: {
        SNOMED_CT_SYSTEM: [
            "387713003", "64368001", "69031006", "172043006",
            "173171007", "112756009", "46093008",
        ],
    },
    CriterionFlag.IMMUNOTHERAPY: {
        RX_NORM_SYSTEM: [
            "1547545",   # pembrolizumab
            "1597876",   # nivolumab
            "1792776",   # atezolizumab
            "1094833",   # ipilimumab
            "1919503",   # durvalumab
            "1875534",   # avelumab
        ],
        SNOMED_CT_SYSTEM: ["76334006"],
    },
    CriterionFlag.BRAF_THERAPY: {
        RX_NORM_SYSTEM: [
            "1147220",   # vemurafenib
            "1424911",   # dabrafenib
            "2049106",   # encorafenib
            "2049112",   # encorafenib 75 MG oral capsule
        ],
    },
    CriterionFlag.MEK_THERAPY: {
        RX_NORM_SYSTEM: [
            "1425098",   # trametinib
            "1722365",   # cobimetinib
            "2049111",   # binimetinib
        ],
    },
    CriterionFlag.ORCHIECTOMY: {
        SNOMED_CT_SYSTEM: ["236334008", "176416006"],
    },
    CriterionFlag.LHRH_AGONISTS: {
        RX_NORM_SYSTEM: [
            "42375",     # leuprolide
            "50610",     # goserelin
            "38782",     # triptorelin
            "5634",      # histrelin
        ],
    },
    CriterionFlag.LHRH_ANTAGONISTS: {
        RX_NORM_SYSTEM: [
            "475230",    # degarelix
            "2472778",   # relugolix
        ],
    },
    CriterionFlag.AD_THERAPY: {
        RX_NORM_SYSTEM: [
            "1100072",   # abiraterone
        ],
        SNOMED_CT_SYSTEM: ["707266006"],
    },
    CriterionFlag.ANTIANDROGENS: {
        RX_NORM_SYSTEM: [
            "83008",     # bicalutamide
            "4508",      # flutamide
            "31805",     # nilutamide
            "1307298",   # enzalutamide
            "1999574",   # apalutamide
            "2180325",   # darolutamide
        ],
    },
    CriterionFlag.PROSTATE_HORMONAL_THERAPY: {
        RX_NORM_SYSTEM: [
            "25025",     # finasteride
            "228790",    # dutasteride
        ],
    },
    CriterionFlag.PROTEASOME_INHIBITORS: {
        RX_NORM_SYSTEM: [
            "358258",    # bortezomib
            "1302966",   # carfilzomib
            "1723735",   # ixazomib
        ],
    },
    CriterionFlag.IMMUNOMODULATORS: {
        RX_NORM_SYSTEM: [
            "342369",    # lenalidomide
            "10432",     # thalidomide
            "1369713",   # pomalidomide
        ],
    },
    CriterionFlag.CORTICOSTEROIDS: {
        RX_NORM_SYSTEM: [
            "3264",      # dexamethasone
            "8640",      # prednisone
            "6902",      # methylprednisolone
            "5492",      # hydrocortisone
        ],
    },
    CriterionFlag.ALLOGENEIC_HSCT: {
        SNOMED_CT_SYSTEM: ["58776007", "709115004"],
    },
    CriterionFlag.AUTOLOGOUS_HSCT: {
        SNOMED_CT_SYSTEM: ["709120000", "14803004"],
    },
}

"""
Parasite Cleanse Protocols Dataset
Version 1.0.0

Static definitions for every cleanse protocol the Protocol Wizard can offer.
Records are plain dicts; ProtocolCatalog turns them into validated, frozen
Protocol models at startup and refuses to start if any record is invalid.

Sources: traditional medicine references, clinical research summaries and
integrative practice. Educational use only - see shared/disclaimer.py.
"""

from typing import Any, Dict, List

PARASITE_CLEANSE_PROTOCOLS: List[Dict[str, Any]] = [
    # ===== TRADITIONAL WESTERN =====
    {
        "id": "traditional-triple",
        "name": "Traditional Triple Herb Protocol (Clark Protocol)",
        "category": "traditional",
        "target_parasites": ["roundworms", "pinworms", "tapeworms", "flukes"],
        "primary_herbs": [
            {
                "name": "Black Walnut Hull",
                "latin_name": "Juglans nigra",
                "dosage": "250-500mg",
                "timing": "3x daily before meals",
                "active_compounds": ["juglone", "tannins", "iodine"],
                "mechanism": "Disrupts parasite metabolism and egg production",
                "preparations": ["tincture", "capsules", "fresh hull extract"],
            },
            {
                "name": "Wormwood",
                "latin_name": "Artemisia absinthium",
                "dosage": "200-400mg",
                "timing": "2x daily with meals",
                "active_compounds": ["artemisinin", "thujone", "absinthin"],
                "mechanism": "Damages parasite cell membranes and nervous system",
                "preparations": ["dried herb", "tincture", "capsules"],
            },
            {
                "name": "Cloves",
                "latin_name": "Syzygium aromaticum",
                "dosage": "500mg",
                "timing": "3x daily with meals",
                "active_compounds": ["eugenol", "caryophyllene"],
                "mechanism": "Destroys parasite eggs and larvae",
                "preparations": ["ground powder", "oil", "capsules"],
            },
        ],
        "duration": {"minimum": 14, "recommended": 30, "maximum": 90},
        "intensity": "moderate",
        "ailment_targets": ["digestive_issues", "bloating", "fatigue", "skin_problems"],
        "contraindications": ["pregnancy", "nursing", "liver_disease", "seizure_disorders"],
        "evidence": "traditional",
        "description": "The classic Dr. Hulda Clark protocol, used worldwide for comprehensive parasite cleansing",
        "protocol": [
            {
                "phase": 1,
                "name": "Initial Cleanse",
                "duration": 14,
                "herbs": ["Black Walnut Hull", "Wormwood", "Cloves"],
                "dietary_restrictions": ["no sugar", "no processed foods", "no alcohol"],
                "supportive_measures": ["probiotics", "fiber supplements", "hydration"],
                "objective": "Eliminate adult parasites and begin egg destruction",
            },
            {
                "phase": 2,
                "name": "Maintenance",
                "duration": 16,
                "herbs": ["Black Walnut Hull", "Cloves"],
                "dietary_restrictions": ["limited sugar", "whole foods diet"],
                "supportive_measures": ["liver support", "digestive enzymes"],
                "objective": "Prevent reinfection and support healing",
            },
        ],
        "effectiveness": {"protozoa": 60, "helminths": 85, "flukes": 70},
        "side_effects": ["die-off symptoms", "nausea", "headaches", "fatigue"],
        "regional_availability": ["north_america", "europe", "australia"],
    },

    # ===== AYURVEDIC =====
    {
        "id": "ayurvedic-comprehensive",
        "name": "Ayurvedic Panchakarma-Inspired Protocol",
        "category": "ayurvedic",
        "target_parasites": ["all_types"],
        "primary_herbs": [
            {
                "name": "Neem",
                "latin_name": "Azadirachta indica",
                "dosage": "500mg",
                "timing": "2x daily on empty stomach",
                "active_compounds": ["azadirachtin", "nimbin", "nimbidin"],
                "mechanism": "Broad-spectrum antiparasitic with immunomodulation",
                "preparations": ["leaf powder", "extract", "oil"],
            },
            {
                "name": "Vidanga",
                "latin_name": "Embelia ribes",
                "dosage": "300mg",
                "timing": "2x daily with warm water",
                "active_compounds": ["embelin", "volatile oils"],
                "mechanism": "Specific for tapeworms and roundworms",
                "preparations": ["powder", "decoction"],
            },
            {
                "name": "Kutki",
                "latin_name": "Picrorhiza kurroa",
                "dosage": "250mg",
                "timing": "2x daily before meals",
                "active_compounds": ["kutkin", "picroside"],
                "mechanism": "Hepatoprotective and antiparasitic",
                "preparations": ["root powder", "extract"],
            },
        ],
        "supporting_herbs": [
            {
                "name": "Triphala",
                "latin_name": "Three fruit combination",
                "dosage": "1000mg",
                "timing": "At bedtime",
                "active_compounds": ["tannins", "gallic acid", "chebulinic acid"],
                "mechanism": "Bowel cleansing and detoxification",
                "preparations": ["powder", "tablets"],
            },
        ],
        "duration": {"minimum": 21, "recommended": 45, "maximum": 90},
        "intensity": "gentle",
        "ailment_targets": ["digestive_weakness", "malabsorption", "chronic_fatigue", "immune_dysfunction"],
        "contraindications": ["pregnancy", "severe_debility", "acute_illness"],
        "evidence": "traditional",
        "description": "Traditional Ayurvedic approach focusing on digestive fire and elimination",
        "protocol": [
            {
                "phase": 1,
                "name": "Preparation (Purvakarma)",
                "duration": 7,
                "herbs": ["Triphala", "Ginger"],
                "dietary_restrictions": ["vegetarian", "no cold foods", "easy to digest"],
                "supportive_measures": ["oil pulling", "warm water", "meditation"],
                "objective": "Prepare digestive system and loosen toxins",
            },
            {
                "phase": 2,
                "name": "Main Cleanse (Pradhanakarma)",
                "duration": 21,
                "herbs": ["Neem", "Vidanga", "Kutki"],
                "dietary_restrictions": ["kitchari diet", "no dairy", "no meat"],
                "supportive_measures": ["yoga", "pranayama", "castor oil packs"],
                "objective": "Eliminate parasites and toxins",
            },
            {
                "phase": 3,
                "name": "Rejuvenation (Paschatkarma)",
                "duration": 17,
                "herbs": ["Ashwagandha", "Guduchi", "Triphala"],
                "dietary_restrictions": ["gradual food reintroduction"],
                "supportive_measures": ["rasayana herbs", "meditation"],
                "objective": "Rebuild strength and prevent reinfection",
            },
        ],
        "effectiveness": {"protozoa": 70, "helminths": 75, "flukes": 65},
        "side_effects": ["mild digestive upset", "temporary weakness", "detox symptoms"],
        "regional_availability": ["india", "asia", "specialty_stores_worldwide"],
    },

    # ===== MODERN / RESEARCH-BACKED =====
    {
        "id": "modern-berberine",
        "name": "Modern Berberine-Based Protocol",
        "category": "modern",
        "target_parasites": ["giardia", "blastocystis", "entamoeba", "cryptosporidium"],
        "primary_herbs": [
            {
                "name": "Berberine",
                "latin_name": "Multiple sources",
                "dosage": "500mg",
                "timing": "3x daily with meals",
                "active_compounds": ["berberine HCl"],
                "mechanism": "Disrupts parasite DNA and energy metabolism",
                "preparations": ["standardized extract", "capsules"],
            },
            {
                "name": "Oregano Oil",
                "latin_name": "Origanum vulgare",
                "dosage": "150mg",
                "timing": "2x daily with meals",
                "active_compounds": ["carvacrol", "thymol"],
                "mechanism": "Damages parasite cell walls",
                "preparations": ["enteric-coated capsules", "emulsified oil"],
            },
            {
                "name": "Grapefruit Seed Extract",
                "latin_name": "Citrus paradisi",
                "dosage": "250mg",
                "timing": "3x daily between meals",
                "active_compounds": ["flavonoids", "limonoids"],
                "mechanism": "Broad-spectrum antimicrobial",
                "preparations": ["liquid extract", "capsules"],
            },
        ],
        "duration": {"minimum": 10, "recommended": 20, "maximum": 30},
        "intensity": "moderate",
        "ailment_targets": ["traveler_diarrhea", "IBS", "SIBO", "chronic_diarrhea"],
        "contraindications": ["pregnancy", "hypoglycemia", "low_blood_pressure"],
        "evidence": "clinical_studies",
        "description": "Research-backed protocol using compounds with proven antiparasitic activity",
        "protocol": [
            {
                "phase": 1,
                "name": "Loading Phase",
                "duration": 5,
                "herbs": ["Berberine", "Oregano Oil"],
                "dietary_restrictions": ["low sugar", "no alcohol"],
                "supportive_measures": ["probiotics 2 hours apart", "electrolytes"],
                "objective": "Achieve therapeutic levels",
            },
            {
                "phase": 2,
                "name": "Treatment Phase",
                "duration": 15,
                "herbs": ["Berberine", "Oregano Oil", "Grapefruit Seed Extract"],
                "dietary_restrictions": ["anti-parasitic diet", "high fiber"],
                "supportive_measures": ["S. boulardii", "L-glutamine"],
                "objective": "Eliminate parasites and heal gut",
            },
        ],
        "effectiveness": {"protozoa": 90, "helminths": 40, "flukes": 30},
        "side_effects": ["digestive upset", "headaches", "temporary constipation"],
        "regional_availability": ["worldwide"],
    },
    {
        "id": "gentle-food-based",
        "name": "Gentle Food-Based Protocol",
        "category": "combination",
        "target_parasites": ["general_prevention", "mild_infections"],
        "primary_herbs": [
            {
                "name": "Pumpkin Seeds",
                "latin_name": "Cucurbita pepo",
                "dosage": "1 cup raw seeds",
                "timing": "Morning on empty stomach",
                "active_compounds": ["cucurbitacin", "fatty acids"],
                "mechanism": "Paralyzes worms for easy elimination",
                "preparations": ["raw seeds", "seed butter", "oil"],
            },
            {
                "name": "Papaya Seeds",
                "latin_name": "Carica papaya",
                "dosage": "1 tablespoon",
                "timing": "With papaya fruit",
                "active_compounds": ["carpaine", "benzyl isothiocyanate"],
                "mechanism": "Proteolytic enzymes digest worms",
                "preparations": ["fresh seeds", "dried powder"],
            },
            {
                "name": "Garlic",
                "latin_name": "Allium sativum",
                "dosage": "3-4 cloves (3g)",
                "timing": "Throughout day with meals",
                "active_compounds": ["allicin", "ajoene"],
                "mechanism": "Antimicrobial and immune boosting",
                "preparations": ["fresh crushed", "aged extract"],
            },
        ],
        "duration": {"minimum": 7, "recommended": 14, "maximum": 30},
        "intensity": "gentle",
        "ailment_targets": ["mild_digestive_issues", "prevention", "children_safe"],
        "contraindications": ["severe_allergies"],
        "evidence": "traditional",
        "description": "Safe, food-based approach suitable for sensitive individuals and children",
        "protocol": [
            {
                "phase": 1,
                "name": "Preparation",
                "duration": 3,
                "herbs": ["Garlic", "Ginger"],
                "dietary_restrictions": ["reduce sugar", "increase fiber"],
                "supportive_measures": ["warm lemon water", "rest"],
                "objective": "Prepare digestive system",
            },
            {
                "phase": 2,
                "name": "Active Cleanse",
                "duration": 11,
                "herbs": ["Pumpkin Seeds", "Papaya Seeds", "Garlic"],
                "dietary_restrictions": ["whole foods", "fermented foods"],
                "supportive_measures": ["probiotics", "coconut oil"],
                "objective": "Gentle parasite elimination",
            },
        ],
        "effectiveness": {"protozoa": 40, "helminths": 60, "flukes": 30},
        "side_effects": ["mild gas", "garlic breath"],
        "regional_availability": ["worldwide"],
    },
    {
        "id": "artemisinin-clinical",
        "name": "Artemisinin Clinical Protocol",
        "category": "modern",
        "target_parasites": ["malaria", "babesia", "toxoplasma", "schistosomiasis"],
        "primary_herbs": [
            {
                "name": "Artemisinin",
                "latin_name": "Artemisia annua extract",
                "dosage": "200mg",
                "timing": "2x daily, pulsed schedule",
                "active_compounds": ["artemisinin", "dihydroartemisinin"],
                "mechanism": "Free radical damage to parasites",
                "preparations": ["standardized extract", "prescription forms"],
            },
            {
                "name": "Sweet Wormwood",
                "latin_name": "Artemisia annua",
                "dosage": "500mg whole herb",
                "timing": "3x daily with meals",
                "active_compounds": ["artemisinin", "flavonoids", "terpenoids"],
                "mechanism": "Synergistic antiparasitic effects",
                "preparations": ["whole herb", "tea", "tincture"],
            },
        ],
        "duration": {"minimum": 5, "recommended": 10, "maximum": 20},
        "intensity": "intensive",
        "ailment_targets": ["severe_parasitic_infections", "treatment_resistant_cases"],
        "contraindications": ["pregnancy", "G6PD_deficiency", "liver_disease"],
        "evidence": "who_approved",
        "description": "WHO-recognized treatment, Nobel Prize-winning discovery",
        "protocol": [
            {
                "phase": 1,
                "name": "Pulsed Treatment",
                "duration": 10,
                "herbs": ["Artemisinin", "Sweet Wormwood"],
                "dietary_restrictions": ["no iron supplements", "low iron foods during treatment"],
                "supportive_measures": ["liver support", "antioxidants"],
                "objective": "Maximum parasite elimination",
            },
        ],
        "effectiveness": {"protozoa": 95, "helminths": 50, "flukes": 70},
        "side_effects": ["nausea", "dizziness", "temporary anemia"],
        "regional_availability": ["worldwide_with_prescription", "specialty_suppliers"],
    },
    {
        "id": "mimosa-pudica-protocol",
        "name": "Mimosa Pudica Seed Protocol",
        "category": "traditional",
        "target_parasites": ["intestinal_worms", "rope_worms", "biofilm"],
        "primary_herbs": [
            {
                "name": "Mimosa Pudica Seed",
                "latin_name": "Mimosa pudica",
                "dosage": "1000mg",
                "timing": "2x daily on empty stomach",
                "active_compounds": ["mimosine", "mucilage", "tannins"],
                "mechanism": "Binds to parasites and pulls them out",
                "preparations": ["seed powder", "capsules"],
            },
        ],
        "duration": {"minimum": 30, "recommended": 60, "maximum": 90},
        "intensity": "gentle",
        "ailment_targets": ["chronic_constipation", "biofilm_issues", "gut_dysbiosis"],
        "contraindications": ["intestinal_obstruction"],
        "evidence": "traditional",
        "description": "Gentle gut scrubber that binds and removes parasites",
        "protocol": [
            {
                "phase": 1,
                "name": "Gut Scrubbing",
                "duration": 60,
                "herbs": ["Mimosa Pudica Seed"],
                "dietary_restrictions": ["high fiber", "adequate hydration"],
                "supportive_measures": ["magnesium", "vitamin C"],
                "objective": "Continuous gentle elimination",
            },
        ],
        "effectiveness": {"protozoa": 50, "helminths": 70, "flukes": 40},
        "side_effects": ["temporary constipation", "bloating"],
        "regional_availability": ["specialty_stores", "online"],
    },
    {
        "id": "diatomaceous-earth",
        "name": "Diatomaceous Earth Protocol",
        "category": "modern",
        "target_parasites": ["intestinal_parasites", "candida"],
        "primary_herbs": [
            {
                "name": "Diatomaceous Earth",
                "latin_name": "Fossil shell flour",
                "dosage": "1-2 teaspoons",
                "timing": "Morning in water",
                "active_compounds": ["silica", "minerals"],
                "mechanism": "Mechanical damage to parasite exoskeletons",
                "preparations": ["food grade powder"],
            },
        ],
        "duration": {"minimum": 10, "recommended": 30, "maximum": 90},
        "intensity": "gentle",
        "ailment_targets": ["general_detox", "heavy_metals", "digestive_issues", "bloating"],
        "contraindications": ["respiratory_issues"],
        "evidence": "clinical_studies",
        "description": "Mechanical elimination through microscopic sharp edges",
        "protocol": [
            {
                "phase": 1,
                "name": "Gradual Introduction",
                "duration": 30,
                "herbs": ["Diatomaceous Earth"],
                "dietary_restrictions": ["plenty of water"],
                "supportive_measures": ["electrolytes", "minerals"],
                "objective": "Physical elimination of parasites",
            },
        ],
        "effectiveness": {"protozoa": 30, "helminths": 60, "flukes": 20},
        "side_effects": ["constipation if not enough water", "dry skin"],
        "regional_availability": ["worldwide"],
    },
    {
        "id": "olive-leaf-protocol",
        "name": "Olive Leaf Extract Protocol",
        "category": "modern",
        "target_parasites": ["viral_coinfections", "bacterial_parasites", "fungi"],
        "primary_herbs": [
            {
                "name": "Olive Leaf Extract",
                "latin_name": "Olea europaea",
                "dosage": "500mg (20% oleuropein)",
                "timing": "3x daily with meals",
                "active_compounds": ["oleuropein", "hydroxytyrosol"],
                "mechanism": "Disrupts pathogen replication",
                "preparations": ["standardized extract", "liquid"],
            },
        ],
        "duration": {"minimum": 14, "recommended": 30, "maximum": 60},
        "intensity": "moderate",
        "ailment_targets": ["chronic_infections", "immune_dysfunction"],
        "contraindications": ["low_blood_pressure"],
        "evidence": "clinical_studies",
        "description": "Broad-spectrum antimicrobial with immune support",
        "protocol": [
            {
                "phase": 1,
                "name": "Antimicrobial Phase",
                "duration": 30,
                "herbs": ["Olive Leaf Extract"],
                "dietary_restrictions": ["Mediterranean diet"],
                "supportive_measures": ["vitamin D", "zinc"],
                "objective": "Eliminate pathogens and boost immunity",
            },
        ],
        "effectiveness": {"protozoa": 60, "helminths": 40, "flukes": 30},
        "side_effects": ["die-off reactions", "temporary fatigue"],
        "regional_availability": ["worldwide"],
    },
    {
        "id": "turpentine-protocol",
        "name": "Traditional Turpentine Protocol",
        "category": "traditional",
        "target_parasites": ["candida", "biofilm", "resistant_parasites"],
        "primary_herbs": [
            {
                "name": "Pure Gum Turpentine",
                "latin_name": "Pinus palustris",
                "dosage": "1/4 - 1 teaspoon",
                "timing": "With sugar cube, 2x weekly",
                "active_compounds": ["alpha-pinene", "beta-pinene"],
                "mechanism": "Solvent action on biofilms",
                "preparations": ["100% pure gum spirits"],
            },
        ],
        "duration": {"minimum": 4, "recommended": 8, "maximum": 12},
        "intensity": "intensive",
        "ailment_targets": ["biofilm_infections", "candida_overgrowth"],
        "contraindications": ["kidney_disease", "pregnancy", "children"],
        "evidence": "traditional",
        "description": "Historical remedy requiring extreme caution",
        "protocol": [
            {
                "phase": 1,
                "name": "Careful Administration",
                "duration": 8,
                "herbs": ["Pure Gum Turpentine"],
                "dietary_restrictions": ["no alcohol", "light diet"],
                "supportive_measures": ["castor oil", "activated charcoal"],
                "objective": "Biofilm disruption",
            },
        ],
        "effectiveness": {"protozoa": 70, "helminths": 50, "flukes": 40},
        "side_effects": ["nausea", "kidney stress", "dizziness"],
        "regional_availability": ["specialty_suppliers"],
    },
    {
        "id": "mebendazole-herbal-combo",
        "name": "Pharmaceutical-Herbal Combination",
        "category": "combination",
        "target_parasites": ["pinworms", "roundworms", "hookworms", "whipworms"],
        "primary_herbs": [
            {
                "name": "Pharmaceutical Support",
                "latin_name": "With medical supervision",
                "dosage": "200mg as prescribed",
                "timing": "Per medical guidance",
                "active_compounds": ["prescription medication"],
                "mechanism": "Inhibits glucose uptake in worms",
                "preparations": ["prescription only"],
            },
            {
                "name": "Milk Thistle",
                "latin_name": "Silybum marianum",
                "dosage": "300mg",
                "timing": "3x daily",
                "active_compounds": ["silymarin"],
                "mechanism": "Liver protection during treatment",
                "preparations": ["standardized extract"],
            },
        ],
        "duration": {"minimum": 3, "recommended": 7, "maximum": 14},
        "intensity": "intensive",
        "ailment_targets": ["confirmed_parasitic_infections"],
        "contraindications": ["pregnancy", "liver_disease"],
        "evidence": "clinical_studies",
        "description": "Medical treatment with herbal liver support",
        "protocol": [
            {
                "phase": 1,
                "name": "Medical Treatment",
                "duration": 7,
                "herbs": ["Pharmaceutical Support", "Milk Thistle"],
                "dietary_restrictions": ["as directed by physician"],
                "supportive_measures": ["medical monitoring"],
                "objective": "Eliminate confirmed parasites",
            },
        ],
        "effectiveness": {"protozoa": 30, "helminths": 95, "flukes": 60},
        "side_effects": ["as per medication insert"],
        "regional_availability": ["prescription_required"],
    },
    {
        "id": "tribulus-terrestris",
        "name": "Tribulus Terrestris Protocol",
        "category": "ayurvedic",
        "target_parasites": ["urinary_parasites", "kidney_flukes"],
        "primary_herbs": [
            {
                "name": "Tribulus Terrestris",
                "latin_name": "Tribulus terrestris",
                "dosage": "500mg",
                "timing": "2x daily",
                "active_compounds": ["saponins", "flavonoids"],
                "mechanism": "Urinary tract cleansing",
                "preparations": ["standardized extract", "powder"],
            },
        ],
        "duration": {"minimum": 14, "recommended": 30, "maximum": 45},
        "intensity": "gentle",
        "ailment_targets": ["UTI", "kidney_stones", "urinary_parasites"],
        "contraindications": ["pregnancy", "hormone_sensitive_conditions"],
        "evidence": "traditional",
        "description": "Specialized for urinary system parasites",
        "protocol": [
            {
                "phase": 1,
                "name": "Urinary Cleanse",
                "duration": 30,
                "herbs": ["Tribulus Terrestris"],
                "dietary_restrictions": ["increase water intake"],
                "supportive_measures": ["cranberry extract", "D-mannose"],
                "objective": "Clear urinary system",
            },
        ],
        "effectiveness": {"protozoa": 40, "helminths": 30, "flukes": 50},
        "side_effects": ["stomach upset", "insomnia"],
        "regional_availability": ["worldwide"],
    },
    {
        "id": "goldenseal-barberry",
        "name": "Goldenseal-Barberry Protocol",
        "category": "traditional",
        "target_parasites": ["giardia", "entamoeba", "bacterial_coinfections"],
        "primary_herbs": [
            {
                "name": "Goldenseal",
                "latin_name": "Hydrastis canadensis",
                "dosage": "250mg",
                "timing": "3x daily",
                "active_compounds": ["berberine", "hydrastine"],
                "mechanism": "Antimicrobial and mucous membrane healing",
                "preparations": ["root extract", "tincture"],
            },
            {
                "name": "Barberry",
                "latin_name": "Berberis vulgaris",
                "dosage": "250mg",
                "timing": "3x daily",
                "active_compounds": ["berberine", "berbamine"],
                "mechanism": "Antiparasitic and liver support",
                "preparations": ["bark extract", "tincture"],
            },
        ],
        "duration": {"minimum": 10, "recommended": 20, "maximum": 30},
        "intensity": "moderate",
        "ailment_targets": ["traveler_diarrhea", "digestive_infections"],
        "contraindications": ["pregnancy", "hypertension"],
        "evidence": "clinical_studies",
        "description": "North American traditional remedy with proven efficacy",
        "protocol": [
            {
                "phase": 1,
                "name": "Antimicrobial Phase",
                "duration": 20,
                "herbs": ["Goldenseal", "Barberry"],
                "dietary_restrictions": ["no dairy", "no sugar"],
                "supportive_measures": ["probiotics", "glutamine"],
                "objective": "Eliminate pathogens",
            },
        ],
        "effectiveness": {"protozoa": 85, "helminths": 45, "flukes": 35},
        "side_effects": ["digestive upset", "headaches"],
        "regional_availability": ["north_america", "europe"],
    },
    {
        "id": "black-seed-protocol",
        "name": "Black Seed (Nigella Sativa) Protocol",
        "category": "traditional",
        "target_parasites": ["tapeworms", "roundworms", "protozoa"],
        "primary_herbs": [
            {
                "name": "Black Seed",
                "latin_name": "Nigella sativa",
                "dosage": "1-2 teaspoons oil or 500mg extract",
                "timing": "2x daily with meals",
                "active_compounds": ["thymoquinone", "thymohydroquinone"],
                "mechanism": "Antiparasitic and immunomodulation",
                "preparations": ["cold-pressed oil", "seed powder", "extract"],
            },
        ],
        "duration": {"minimum": 14, "recommended": 30, "maximum": 60},
        "intensity": "gentle",
        "ailment_targets": ["immune_dysfunction", "allergies", "parasites"],
        "contraindications": ["pregnancy", "bleeding_disorders"],
        "evidence": "clinical_studies",
        "description": "The blessed seed with multiple health benefits",
        "protocol": [
            {
                "phase": 1,
                "name": "Immune Building",
                "duration": 30,
                "herbs": ["Black Seed"],
                "dietary_restrictions": ["anti-inflammatory diet"],
                "supportive_measures": ["honey combination", "vitamin D"],
                "objective": "Eliminate parasites while building immunity",
            },
        ],
        "effectiveness": {"protozoa": 65, "helminths": 70, "flukes": 50},
        "side_effects": ["mild nausea", "allergic reactions rare"],
        "regional_availability": ["middle_east", "worldwide"],
    },

    # ===== AMAZONIAN / LATIN AMERICAN =====
    {
        "id": "pau-darco-protocol",
        "name": "Pau D'Arco Amazonian Protocol",
        "category": "traditional",
        "target_parasites": ["candida", "parasites", "viral_coinfections"],
        "primary_herbs": [
            {
                "name": "Pau D'Arco",
                "latin_name": "Tabebuia impetiginosa",
                "dosage": "1-2g bark or 500mg extract",
                "timing": "3x daily as tea or capsules",
                "active_compounds": ["lapachol", "beta-lapachone"],
                "mechanism": "Antimicrobial and immune stimulation",
                "preparations": ["inner bark tea", "tincture", "extract"],
            },
        ],
        "duration": {"minimum": 14, "recommended": 30, "maximum": 45},
        "intensity": "moderate",
        "ailment_targets": ["candida_overgrowth", "chronic_infections"],
        "contraindications": ["blood_thinners", "pregnancy"],
        "evidence": "traditional",
        "description": "Rainforest remedy with broad antimicrobial spectrum",
        "protocol": [
            {
                "phase": 1,
                "name": "Antimicrobial Phase",
                "duration": 30,
                "herbs": ["Pau D'Arco"],
                "dietary_restrictions": ["no sugar", "no yeast"],
                "supportive_measures": ["probiotics", "caprylic acid"],
                "objective": "Eliminate parasites and fungal overgrowth",
            },
        ],
        "effectiveness": {"protozoa": 55, "helminths": 50, "flukes": 40},
        "side_effects": ["nausea at high doses", "dizziness"],
        "regional_availability": ["south_america", "specialty_stores"],
    },
    {
        "id": "andrographis-protocol",
        "name": "Andrographis Immune Protocol",
        "category": "ayurvedic",
        "target_parasites": ["bacterial_parasites", "protozoa", "liver_flukes"],
        "primary_herbs": [
            {
                "name": "Andrographis",
                "latin_name": "Andrographis paniculata",
                "dosage": "400mg standardized",
                "timing": "3x daily before meals",
                "active_compounds": ["andrographolide", "neoandrographolide"],
                "mechanism": "Immune enhancement and direct antimicrobial",
                "preparations": ["standardized extract", "whole herb"],
            },
        ],
        "duration": {"minimum": 7, "recommended": 14, "maximum": 21},
        "intensity": "moderate",
        "ailment_targets": ["acute_infections", "liver_parasites"],
        "contraindications": ["pregnancy", "autoimmune_diseases"],
        "evidence": "clinical_studies",
        "description": "King of bitters for acute parasitic infections",
        "protocol": [
            {
                "phase": 1,
                "name": "Acute Treatment",
                "duration": 14,
                "herbs": ["Andrographis"],
                "dietary_restrictions": ["light diet", "no alcohol"],
                "supportive_measures": ["rest", "hydration"],
                "objective": "Rapid parasite elimination",
            },
        ],
        "effectiveness": {"protozoa": 75, "helminths": 40, "flukes": 65},
        "side_effects": ["bitter taste", "GI upset", "headache"],
        "regional_availability": ["asia", "specialty_stores"],
    },
    {
        "id": "cat-claw-protocol",
        "name": "Cat's Claw Amazonian Protocol",
        "category": "traditional",
        "target_parasites": ["intestinal_parasites", "candida", "bacteria"],
        "primary_herbs": [
            {
                "name": "Cat's Claw",
                "latin_name": "Uncaria tomentosa",
                "dosage": "500mg",
                "timing": "2x daily",
                "active_compounds": ["pentacyclic oxindole alkaloids", "glycosides"],
                "mechanism": "Immune modulation and antimicrobial",
                "preparations": ["inner bark extract", "tea", "tincture"],
            },
        ],
        "duration": {"minimum": 30, "recommended": 60, "maximum": 90},
        "intensity": "gentle",
        "ailment_targets": ["chronic_fatigue", "autoimmune_issues", "parasites"],
        "contraindications": ["pregnancy", "organ_transplant"],
        "evidence": "traditional",
        "description": "Sacred vine of the rainforest for deep immune support",
        "protocol": [
            {
                "phase": 1,
                "name": "Immune Restoration",
                "duration": 60,
                "herbs": ["Cat's Claw"],
                "dietary_restrictions": ["anti-inflammatory diet"],
                "supportive_measures": ["meditation", "stress reduction"],
                "objective": "Long-term immune building and parasite elimination",
            },
        ],
        "effectiveness": {"protozoa": 60, "helminths": 55, "flukes": 45},
        "side_effects": ["mild dizziness", "diarrhea at high doses"],
        "regional_availability": ["south_america", "worldwide"],
    },

    # ===== MEDITERRANEAN / EUROPEAN =====
    {
        "id": "thyme-protocol",
        "name": "Thyme Essential Oil Protocol",
        "category": "traditional",
        "target_parasites": ["intestinal_worms", "protozoa", "fungi"],
        "primary_herbs": [
            {
                "name": "Thyme",
                "latin_name": "Thymus vulgaris",
                "dosage": "2-3 drops essential oil or 500mg herb",
                "timing": "3x daily with meals",
                "active_compounds": ["thymol", "carvacrol", "linalool"],
                "mechanism": "Antimicrobial and anthelmintic",
                "preparations": ["essential oil capsules", "tea", "tincture"],
            },
        ],
        "duration": {"minimum": 10, "recommended": 20, "maximum": 30},
        "intensity": "moderate",
        "ailment_targets": ["digestive_issues", "digestive_parasites", "respiratory_infections"],
        "contraindications": ["pregnancy", "hypertension"],
        "evidence": "traditional",
        "description": "Mediterranean herb with potent antiparasitic properties",
        "protocol": [
            {
                "phase": 1,
                "name": "Antimicrobial Treatment",
                "duration": 20,
                "herbs": ["Thyme"],
                "dietary_restrictions": ["Mediterranean diet"],
                "supportive_measures": ["probiotics", "digestive enzymes"],
                "objective": "Eliminate parasites and support digestion",
            },
        ],
        "effectiveness": {"protozoa": 65, "helminths": 60, "flukes": 40},
        "side_effects": ["heartburn", "skin sensitivity"],
        "regional_availability": ["worldwide"],
    },
    {
        "id": "tansy-protocol",
        "name": "Traditional Tansy Protocol",
        "category": "traditional",
        "target_parasites": ["roundworms", "pinworms", "giardia"],
        "primary_herbs": [
            {
                "name": "Tansy",
                "latin_name": "Tanacetum vulgare",
                "dosage": "100-200mg",
                "timing": "2x daily for 3 days only",
                "active_compounds": ["thujone", "camphor", "parthenolide"],
                "mechanism": "Neurotoxic to parasites",
                "preparations": ["dried herb", "tincture diluted"],
            },
        ],
        "duration": {"minimum": 3, "recommended": 3, "maximum": 7},
        "intensity": "intensive",
        "ailment_targets": ["acute_worm_infections"],
        "contraindications": ["pregnancy", "children", "seizure_disorders"],
        "evidence": "traditional",
        "description": "Powerful but potentially toxic - use with extreme caution",
        "protocol": [
            {
                "phase": 1,
                "name": "Short Intensive",
                "duration": 3,
                "herbs": ["Tansy"],
                "dietary_restrictions": ["light diet"],
                "supportive_measures": ["activated charcoal", "milk thistle"],
                "objective": "Rapid worm expulsion",
            },
        ],
        "effectiveness": {"protozoa": 60, "helminths": 80, "flukes": 50},
        "side_effects": ["nausea", "vomiting", "seizures at high doses"],
        "regional_availability": ["europe", "north_america"],
    },
    {
        "id": "quassia-protocol",
        "name": "Quassia Wood Protocol",
        "category": "traditional",
        "target_parasites": ["pinworms", "threadworms", "amoebas"],
        "primary_herbs": [
            {
                "name": "Quassia",
                "latin_name": "Quassia amara",
                "dosage": "250mg",
                "timing": "3x daily before meals",
                "active_compounds": ["quassin", "neoquassin"],
                "mechanism": "Toxic to parasites, stimulates digestion",
                "preparations": ["wood chips tea", "tincture", "extract"],
            },
        ],
        "duration": {"minimum": 7, "recommended": 14, "maximum": 21},
        "intensity": "moderate",
        "ailment_targets": ["pinworm_infections", "poor_digestion"],
        "contraindications": ["pregnancy", "stomach_ulcers"],
        "evidence": "traditional",
        "description": "Bitter wood from the Amazon, specific for pinworms",
        "protocol": [
            {
                "phase": 1,
                "name": "Antiparasitic Phase",
                "duration": 14,
                "herbs": ["Quassia"],
                "dietary_restrictions": ["no sugar", "high fiber"],
                "supportive_measures": ["enemas for pinworms", "hygiene measures"],
                "objective": "Eliminate threadworms and pinworms",
            },
        ],
        "effectiveness": {"protozoa": 55, "helminths": 75, "flukes": 35},
        "side_effects": ["nausea", "stomach cramps"],
        "regional_availability": ["central_america", "specialty_stores"],
    },
    {
        "id": "epazote-protocol",
        "name": "Mexican Epazote Protocol",
        "category": "traditional",
        "target_parasites": ["intestinal_worms", "amoebas", "giardia"],
        "primary_herbs": [
            {
                "name": "Epazote",
                "latin_name": "Dysphania ambrosioides",
                "dosage": "1-2g herb or 5-10 drops oil",
                "timing": "2x daily with meals",
                "active_compounds": ["ascaridole", "limonene", "p-cymene"],
                "mechanism": "Paralyzes and expels worms",
                "preparations": ["fresh herb", "tea", "essential oil diluted"],
            },
        ],
        "duration": {"minimum": 3, "recommended": 7, "maximum": 14},
        "intensity": "moderate",
        "ailment_targets": ["intestinal_worms", "gas", "bloating", "digestive_issues"],
        "contraindications": ["pregnancy", "kidney_disease"],
        "evidence": "traditional",
        "description": "Traditional Mexican remedy for intestinal parasites",
        "protocol": [
            {
                "phase": 1,
                "name": "Worm Expulsion",
                "duration": 7,
                "herbs": ["Epazote"],
                "dietary_restrictions": ["beans with epazote", "high fiber"],
                "supportive_measures": ["pumpkin seeds", "garlic"],
                "objective": "Traditional worm elimination",
            },
        ],
        "effectiveness": {"protozoa": 60, "helminths": 70, "flukes": 40},
        "side_effects": ["nausea", "dizziness", "headache"],
        "regional_availability": ["mexico", "central_america", "specialty_stores"],
    },
]

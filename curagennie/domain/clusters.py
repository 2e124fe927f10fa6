"""Symptom clusters used by the rule-based analysis engine.

Each cluster couples a set of trigger keywords with the condition it suggests and
the advice that goes with it. The order of ``CLUSTERS`` is the order in which the
engine checks them, and that order is visible in the output: it breaks ties
between equally probable conditions and it sets the order of guidance and
lifestyle tips.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .models import ConditionCandidate, DetailedInfo, Severity


@dataclass(frozen=True)
class Cluster:
    key: str
    keywords: Tuple[str, ...]
    condition: ConditionCandidate
    guidance: Tuple[str, ...] = ()
    lifestyle_tips: Tuple[str, ...] = ()
    # Probability used instead of the template's when SpO2 is below threshold
    escalated_probability: Optional[int] = None


BASELINE_GUIDANCE = (
    "This is not a medical diagnosis. Use it for awareness only and consult a qualified doctor.",
    "If your symptoms get worse or you feel very unwell, seek medical help immediately.",
)

FALLBACK_LIFESTYLE_TIP = "Keep a regular routine of balanced meals, enough water and good sleep while you recover."

SPO2_ESCALATION_THRESHOLD = 94


RESPIRATORY = Cluster(
    key="respiratory",
    keywords=(
        "fever", "cough", "sore throat", "cold", "runny nose", "congestion",
        "chills", "phlegm", "wheez", "breathless",
    ),
    condition=ConditionCandidate(
        name="Viral upper respiratory infection",
        probability=75,
        description=(
            "A common viral infection of the nose, throat and airways. It usually "
            "improves on its own within one to two weeks with rest and fluids."
        ),
        severity=Severity.MODERATE,
        detailed_info=DetailedInfo(
            prevention=[
                "Wash your hands often with soap and water.",
                "Avoid close contact with people who are sick.",
            ],
            self_care=[
                "Rest and drink plenty of warm fluids.",
                "Steam inhalation or a saltwater gargle can ease congestion and throat pain.",
            ],
            when_to_see_doctor=[
                "Fever above 39°C or lasting more than three days.",
                "Breathing difficulty, chest pain or bluish lips.",
            ],
            common_approaches=[
                "Doctors may suggest fever reducers, decongestants or throat lozenges.",
            ],
            exercises=[
                "Gentle deep-breathing exercises once the fever settles.",
                "Avoid strenuous workouts until you have fully recovered.",
            ],
            diet_tips=[
                "Warm soups, herbal tea and fruit rich in vitamin C.",
            ],
            how_others_can_help=[
                "Help with meals and fluids and check the temperature regularly.",
            ],
        ),
    ),
    guidance=(
        "Stay hydrated and rest; monitor your temperature twice a day.",
        "Wear a mask around others to avoid spreading the infection.",
    ),
    lifestyle_tips=(
        "Use a humidifier or steam to keep your airways moist.",
    ),
)

GASTROINTESTINAL = Cluster(
    key="gastrointestinal",
    keywords=(
        "stomach", "abdominal", "abdomen", "nausea", "vomit", "diarrh",
        "loose motion", "constipation", "acidity", "heartburn", "indigestion",
        "bloating",
    ),
    condition=ConditionCandidate(
        name="Gastroenteritis or digestive upset",
        probability=70,
        description=(
            "Irritation of the stomach or intestines, often from an infection, "
            "something you ate or acidity."
        ),
        severity=Severity.MODERATE,
        detailed_info=DetailedInfo(
            prevention=[
                "Eat freshly cooked food and drink safe water.",
                "Wash your hands before eating and after using the toilet.",
            ],
            self_care=[
                "Sip oral rehydration solution or clear fluids often.",
                "Rest your stomach with small, bland meals.",
            ],
            when_to_see_doctor=[
                "Blood in vomit or stool.",
                "Signs of dehydration such as very little urine or dizziness.",
                "Severe or constant abdominal pain.",
            ],
            common_approaches=[
                "Rehydration is the mainstay; doctors may add antacids or anti-nausea medicine.",
            ],
            exercises=[
                "Short, gentle walks after meals once you can eat normally.",
            ],
            diet_tips=[
                "Try rice, bananas, toast and curd; avoid oily and spicy food.",
            ],
            how_others_can_help=[
                "Keep fluids within reach and watch for signs of dehydration.",
            ],
        ),
    ),
    guidance=(
        "Replace lost fluids with oral rehydration solution or clear liquids.",
    ),
    lifestyle_tips=(
        "Eat smaller, lighter meals and avoid lying down right after eating.",
    ),
)

HEADACHE = Cluster(
    key="headache",
    keywords=("headache", "migraine", "head pain", "dizz", "light sensitivity"),
    condition=ConditionCandidate(
        name="Tension headache or migraine",
        probability=65,
        description=(
            "Head pain linked to stress, poor sleep, screen time or dehydration. "
            "Migraine can also bring nausea and sensitivity to light."
        ),
        severity=Severity.MODERATE,
        detailed_info=DetailedInfo(
            prevention=[
                "Keep regular sleep and meal times.",
                "Take breaks from screens every hour.",
            ],
            self_care=[
                "Rest in a quiet, dark room.",
                "Drink water and apply a cool compress to the forehead.",
            ],
            when_to_see_doctor=[
                "A sudden, severe headache unlike any before.",
                "Headache with fever, stiff neck, confusion or weakness.",
            ],
            common_approaches=[
                "Simple pain relievers and identifying personal triggers.",
            ],
            exercises=[
                "Neck and shoulder stretches.",
                "Relaxation breathing for a few minutes.",
            ],
            diet_tips=[
                "Limit caffeine and avoid skipping meals.",
            ],
            how_others_can_help=[
                "Keep the room quiet and dim during an attack.",
            ],
        ),
    ),
    guidance=(
        "Note what triggers your headaches and how long they last.",
    ),
    lifestyle_tips=(
        "Reduce screen time and keep a consistent sleep schedule.",
    ),
)

CARDIAC = Cluster(
    key="cardiac",
    keywords=(
        "chest pain", "chest tightness", "chest pressure", "palpitation",
        "shortness of breath", "difficulty breathing", "faint",
    ),
    condition=ConditionCandidate(
        name="Possible cardiac or breathing emergency",
        probability=80,
        description=(
            "Chest pain or trouble breathing can come from the heart or lungs and "
            "needs prompt medical evaluation."
        ),
        severity=Severity.HIGH,
        detailed_info=DetailedInfo(
            prevention=[
                "Keep blood pressure, sugar and cholesterol under regular review.",
            ],
            self_care=[
                "Stop any activity and sit upright while you arrange help.",
            ],
            when_to_see_doctor=[
                "Now: call emergency services for chest pain, breathlessness or fainting.",
            ],
            common_approaches=[
                "Emergency teams usually check ECG, oxygen levels and blood tests.",
            ],
            exercises=[],
            diet_tips=[
                "Later on, a low-salt diet rich in vegetables supports heart health.",
            ],
            how_others_can_help=[
                "Stay with the person and call emergency services.",
                "Do not let them drive themselves to hospital.",
            ],
        ),
    ),
    guidance=(
        "Chest pain or breathing difficulty can be serious: seek emergency care now.",
    ),
    escalated_probability=90,
)

MUSCULOSKELETAL = Cluster(
    key="musculoskeletal",
    keywords=(
        "joint pain", "back pain", "neck pain", "knee pain", "muscle",
        "body ache", "body pain", "stiffness", "sprain", "cramp",
    ),
    condition=ConditionCandidate(
        name="Musculoskeletal strain",
        probability=60,
        description=(
            "Pain or stiffness in muscles or joints, often from overuse, posture or "
            "a viral illness."
        ),
        severity=Severity.LOW,
        detailed_info=DetailedInfo(
            prevention=[
                "Warm up before exercise and lift with your legs, not your back.",
            ],
            self_care=[
                "Rest the area and use a cold pack for new pain, heat for stiffness.",
            ],
            when_to_see_doctor=[
                "Swelling, redness or a joint you cannot move.",
                "Pain after a fall or injury, or numbness in the limbs.",
            ],
            common_approaches=[
                "Pain relief, physiotherapy and posture correction.",
            ],
            exercises=[
                "Gentle stretching and range-of-motion movements.",
                "Short walks as tolerated.",
            ],
            diet_tips=[
                "Include calcium and vitamin D rich foods.",
            ],
            how_others_can_help=[
                "Help with heavy chores while you recover.",
            ],
        ),
    ),
    guidance=(
        "Avoid heavy lifting and rest the painful area for a few days.",
    ),
    lifestyle_tips=(
        "Take stretch breaks and check your sitting posture during the day.",
    ),
)

SKIN_ALLERGY = Cluster(
    key="skin_allergy",
    keywords=(
        "rash", "itch", "hives", "allerg", "sneez", "watery eyes", "red eyes",
        "facial swelling", "skin",
    ),
    condition=ConditionCandidate(
        name="Allergic reaction or skin irritation",
        probability=60,
        description=(
            "The body's response to an allergen or irritant, causing rash, itching, "
            "sneezing or watery eyes."
        ),
        severity=Severity.LOW,
        detailed_info=DetailedInfo(
            prevention=[
                "Identify and avoid known triggers such as dust, pollen or new products.",
            ],
            self_care=[
                "Wash the area with mild soap and keep it cool and dry.",
                "Avoid scratching.",
            ],
            when_to_see_doctor=[
                "Swelling of the face, lips or tongue, or difficulty breathing.",
                "A rash that spreads quickly or blisters.",
            ],
            common_approaches=[
                "Antihistamines and soothing creams are commonly used.",
            ],
            exercises=[],
            diet_tips=[
                "Note any food that seems to trigger symptoms.",
            ],
            how_others_can_help=[
                "Keep the home dust-free and wash bedding regularly.",
            ],
        ),
    ),
    guidance=(
        "Stop using any new soap, cream or medicine that may have caused the reaction.",
    ),
    lifestyle_tips=(
        "Wear loose cotton clothing and keep living spaces well ventilated.",
    ),
)

URINARY = Cluster(
    key="urinary",
    keywords=("urinat", "urine", "urinary", "bladder"),
    condition=ConditionCandidate(
        name="Urinary tract infection",
        probability=70,
        description=(
            "An infection of the bladder or urinary tract, often causing burning or "
            "frequent urination."
        ),
        severity=Severity.MODERATE,
        detailed_info=DetailedInfo(
            prevention=[
                "Drink enough water through the day.",
                "Do not hold urine for long periods.",
            ],
            self_care=[
                "Increase fluid intake.",
            ],
            when_to_see_doctor=[
                "Fever, back or side pain, or blood in the urine.",
            ],
            common_approaches=[
                "A urine test; doctors may prescribe a course of antibiotics.",
            ],
            exercises=[],
            diet_tips=[
                "Limit caffeine and sugary drinks.",
            ],
            how_others_can_help=[],
        ),
    ),
    guidance=(
        "A simple urine test can confirm an infection; see a doctor if symptoms persist.",
    ),
    lifestyle_tips=(
        "Drink water regularly and maintain good personal hygiene.",
    ),
)

GENITAL = Cluster(
    key="genital",
    keywords=(
        "genital", "vaginal", "penile", "testicular", "pain during sex",
        "painful intercourse", "sexually transmitted",
    ),
    condition=ConditionCandidate(
        name="Possible genital or sexually transmitted infection",
        probability=65,
        description=(
            "Discharge, sores or pain in the genital area can come from a range of "
            "infections that are easily tested for and treated."
        ),
        severity=Severity.MODERATE,
        detailed_info=DetailedInfo(
            prevention=[
                "Use condoms and get tested regularly if you have new partners.",
            ],
            self_care=[
                "Avoid sexual contact until you have been checked.",
            ],
            when_to_see_doctor=[
                "As soon as possible for any unusual discharge, sore or pain.",
            ],
            common_approaches=[
                "Confidential testing and targeted treatment.",
            ],
            exercises=[],
            diet_tips=[],
            how_others_can_help=[
                "Partners may also need to be tested.",
            ],
        ),
    ),
    guidance=(
        "Get a confidential check-up; these conditions are common and treatable.",
    ),
)

MENTAL_HEALTH = Cluster(
    key="mental_health",
    keywords=(
        "stress", "anxiety", "anxious", "panic", "depress", "low mood",
        "insomnia", "trouble sleeping", "can't sleep",
    ),
    condition=ConditionCandidate(
        name="Stress or anxiety-related symptoms",
        probability=60,
        description=(
            "Ongoing stress or anxiety can affect sleep, mood, appetite and cause "
            "physical symptoms."
        ),
        severity=Severity.LOW,
        detailed_info=DetailedInfo(
            prevention=[
                "Keep a daily routine with time set aside to rest.",
            ],
            self_care=[
                "Try slow breathing, journaling or talking to someone you trust.",
            ],
            when_to_see_doctor=[
                "If you have thoughts of harming yourself, seek help immediately.",
                "If low mood or anxiety lasts more than two weeks.",
            ],
            common_approaches=[
                "Counselling and talking therapies; medicine in some cases.",
            ],
            exercises=[
                "Regular walks, yoga or other moderate exercise.",
            ],
            diet_tips=[
                "Limit caffeine and alcohol.",
            ],
            how_others_can_help=[
                "Listen without judging and encourage professional support.",
            ],
        ),
    ),
    guidance=(
        "Talk to someone you trust about how you are feeling.",
    ),
    lifestyle_tips=(
        "Set aside time each day for relaxation or a short walk outdoors.",
    ),
)


CLUSTERS: Tuple[Cluster, ...] = (
    RESPIRATORY,
    GASTROINTESTINAL,
    HEADACHE,
    CARDIAC,
    MUSCULOSKELETAL,
    SKIN_ALLERGY,
    URINARY,
    GENITAL,
    MENTAL_HEALTH,
)


NON_SPECIFIC_CONDITION = ConditionCandidate(
    name="Non-specific mild illness",
    probability=40,
    description=(
        "Your symptoms do not clearly point to one condition. Many mild illnesses "
        "settle on their own with rest and fluids."
    ),
    severity=Severity.LOW,
    detailed_info=DetailedInfo(
        self_care=["Rest, drink fluids and keep track of how your symptoms change."],
        when_to_see_doctor=["If symptoms last more than a few days or get worse."],
    ),
)

OTHER_CAUSES_CONDITION = ConditionCandidate(
    name="Other possible causes",
    probability=35,
    description=(
        "Other conditions can produce similar symptoms. A doctor can examine you "
        "and order tests if needed."
    ),
    severity=Severity.MODERATE,
    detailed_info=DetailedInfo(
        when_to_see_doctor=["If you are unsure or worried, book a consultation."],
    ),
)

# services/assessment_engine/definitions.py
# Static definitions for the chakra assessment questions and chakra reference data.

CATALOGUE_VERSION = "2.0.0"

# --- Basic assessment: 1-10 agreement slider, five statements per chakra ---
# Every chakra alternates forward and reverse-worded statements (3 forward, 2 reverse).
BASIC_STEP = {
    "id": "basic",
    "title": "Chakra Energy Check",
    "description": "Rate how strongly each statement applies to you, from 1 (not at all) to 10 (completely)",
}

BASIC_QUESTIONS = [
    # Root
    {"id": "root-1", "text": "I feel grounded and secure in my daily life.", "chakra": "root", "inverseScoring": False},
    {"id": "root-2", "text": "I often worry about my basic needs (food, shelter, finances).", "chakra": "root", "inverseScoring": True},
    {"id": "root-3", "text": "I feel physically safe and at home in my environment.", "chakra": "root", "inverseScoring": False},
    {"id": "root-4", "text": "Unexpected changes in my routine leave me feeling destabilized.", "chakra": "root", "inverseScoring": True},
    {"id": "root-5", "text": "I trust my ability to take care of my practical needs.", "chakra": "root", "inverseScoring": False},
    # Sacral
    {"id": "sacral-1", "text": "I feel comfortable expressing my emotions and creativity.", "chakra": "sacral", "inverseScoring": False},
    {"id": "sacral-2", "text": "I struggle with guilt or shame around pleasure and enjoyment.", "chakra": "sacral", "inverseScoring": True},
    {"id": "sacral-3", "text": "I regularly make time for creative activities that bring me joy.", "chakra": "sacral", "inverseScoring": False},
    {"id": "sacral-4", "text": "I often ignore my body's signals and needs.", "chakra": "sacral", "inverseScoring": True},
    {"id": "sacral-5", "text": "I keep a healthy balance between work and pleasure.", "chakra": "sacral", "inverseScoring": False},
    # Solar plexus
    {"id": "solar-plexus-1", "text": "I feel confident in my personal power and decision-making.", "chakra": "solarPlexus", "inverseScoring": False},
    {"id": "solar-plexus-2", "text": "I often let others make decisions for me or doubt my abilities.", "chakra": "solarPlexus", "inverseScoring": True},
    {"id": "solar-plexus-3", "text": "I feel energized and motivated to pursue my goals.", "chakra": "solarPlexus", "inverseScoring": False},
    {"id": "solar-plexus-4", "text": "I frequently feel powerless in difficult situations.", "chakra": "solarPlexus", "inverseScoring": True},
    {"id": "solar-plexus-5", "text": "I assert my needs and boundaries when it matters.", "chakra": "solarPlexus", "inverseScoring": False},
    # Heart
    {"id": "heart-1", "text": "I can give and receive love with ease.", "chakra": "heart", "inverseScoring": False},
    {"id": "heart-2", "text": "I hold onto past hurts and find it difficult to forgive.", "chakra": "heart", "inverseScoring": True},
    {"id": "heart-3", "text": "I practice self-compassion when I make mistakes.", "chakra": "heart", "inverseScoring": False},
    {"id": "heart-4", "text": "I find it difficult to open up emotionally to others.", "chakra": "heart", "inverseScoring": True},
    {"id": "heart-5", "text": "I feel fulfilled and supported in my relationships.", "chakra": "heart", "inverseScoring": False},
    # Throat
    {"id": "throat-1", "text": "I express my truth freely and communicate clearly.", "chakra": "throat", "inverseScoring": False},
    {"id": "throat-2", "text": "I often feel unheard or struggle to speak up for myself.", "chakra": "throat", "inverseScoring": True},
    {"id": "throat-3", "text": "I can express myself easily through writing, speaking or art.", "chakra": "throat", "inverseScoring": False},
    {"id": "throat-4", "text": "I hold back from saying what I really think.", "chakra": "throat", "inverseScoring": True},
    {"id": "throat-5", "text": "My everyday self-expression feels authentic.", "chakra": "throat", "inverseScoring": False},
    # Third eye
    {"id": "third-eye-1", "text": "I trust my intuition and inner wisdom.", "chakra": "thirdEye", "inverseScoring": False},
    {"id": "third-eye-2", "text": "I find it difficult to see the bigger picture or trust my insights.", "chakra": "thirdEye", "inverseScoring": True},
    {"id": "third-eye-3", "text": "I notice subtle patterns and connections in my life.", "chakra": "thirdEye", "inverseScoring": False},
    {"id": "third-eye-4", "text": "I often doubt my inner guidance.", "chakra": "thirdEye", "inverseScoring": True},
    {"id": "third-eye-5", "text": "I have a clear vision for my future.", "chakra": "thirdEye", "inverseScoring": False},
    # Crown
    {"id": "crown-1", "text": "I feel connected to something greater than myself.", "chakra": "crown", "inverseScoring": False},
    {"id": "crown-2", "text": "I often feel disconnected from meaning or purpose in life.", "chakra": "crown", "inverseScoring": True},
    {"id": "crown-3", "text": "I regularly experience a sense of peace and transcendence.", "chakra": "crown", "inverseScoring": False},
    {"id": "crown-4", "text": "I struggle to find meaning in challenging situations.", "chakra": "crown", "inverseScoring": True},
    {"id": "crown-5", "text": "My spiritual beliefs are reflected in my daily actions.", "chakra": "crown", "inverseScoring": False},
]

# --- Enhanced assessment: five steps of 1-5 labelled choices ---
FREQUENCY_OPTIONS = [
    {"value": 1, "label": "Never", "description": "This doesn't apply to me at all"},
    {"value": 2, "label": "Rarely", "description": "This applies to me occasionally"},
    {"value": 3, "label": "Sometimes", "description": "This applies to me about half the time"},
    {"value": 4, "label": "Often", "description": "This applies to me most of the time"},
    {"value": 5, "label": "Always", "description": "This applies to me consistently"},
]

SITUATIONAL_OPTIONS = [
    {"value": 1, "label": "Very uncomfortable", "description": "I would avoid this completely"},
    {"value": 2, "label": "Somewhat uncomfortable", "description": "I would feel anxious but try"},
    {"value": 3, "label": "Neutral", "description": "I could manage this situation"},
    {"value": 4, "label": "Somewhat comfortable", "description": "I would feel at ease"},
    {"value": 5, "label": "Very comfortable", "description": "I would thrive in this situation"},
]

REFLECTION_OPTIONS = [
    {"value": 1, "label": "Not at all", "description": "This is a significant challenge for me"},
    {"value": 2, "label": "Slightly", "description": "I struggle with this frequently"},
    {"value": 3, "label": "Moderately", "description": "I have mixed success with this"},
    {"value": 4, "label": "Considerably", "description": "I do this well most of the time"},
    {"value": 5, "label": "Completely", "description": "This is a consistent strength of mine"},
]

OPTIONS_BY_CATEGORY = {
    "mind": FREQUENCY_OPTIONS,
    "emotional": FREQUENCY_OPTIONS,
    "physical": FREQUENCY_OPTIONS,
    "situational": SITUATIONAL_OPTIONS,
    "reflection": REFLECTION_OPTIONS,
}

ENHANCED_STEPS = [
    {
        "id": "mind-level",
        "title": "Mind Level Assessment",
        "description": "Explore your mental patterns and thought processes",
        "category": "mind",
        "questions": [
            {"id": "q1", "text": "Do you prefer being planned and organized over being spontaneous and free-flowing?", "chakra": "root", "inverseScoring": False},
            {"id": "q2", "text": "Do you find it difficult to market yourself in a work setting and social gatherings?", "chakra": "solarPlexus", "inverseScoring": True},
            {"id": "q3", "text": "Are you often told to speak loudly and clearly?", "chakra": "throat", "inverseScoring": True},
            {"id": "q4", "text": "Do you tend to hide your emotions, keeping a poker face?", "chakra": "heart", "inverseScoring": True},
            {"id": "q5", "text": "Are you often curious to know higher purposes of life such as enlightenment, super-consciousness, etc.?", "chakra": "crown", "inverseScoring": False},
            {"id": "q6", "text": "Do you like to ideate or brainstorm a lot to have creative solutions?", "chakra": "thirdEye", "inverseScoring": False},
            {"id": "q7", "text": "Do you feel that it's you against the world?", "chakra": "root", "inverseScoring": True},
        ],
    },
    {
        "id": "thought-process",
        "title": "Thought Process",
        "description": "Assess how you reason, decide and relate to the world",
        "category": "emotional",
        "questions": [
            {"id": "q8", "text": "Do you feel like thinking analytically comes to you naturally?", "chakra": "thirdEye", "inverseScoring": False},
            {"id": "q9", "text": "Do you like to follow instructions to a tee?", "chakra": "root", "inverseScoring": False},
            {"id": "q10", "text": "Do you feel that all events are meaningful and intended?", "chakra": "crown", "inverseScoring": False},
            {"id": "q11", "text": "Do you feel that the universe is a safe place?", "chakra": "root", "inverseScoring": False},
            {"id": "q12", "text": "Are you comfortable carrying out routine activities such as daily chores, paying bills, etc.?", "chakra": "root", "inverseScoring": False},
            {"id": "q13", "text": "Are you mostly able to be assertive when necessary?", "chakra": "solarPlexus", "inverseScoring": False},
            {"id": "q14", "text": "Do you tend to keep people at a distance?", "chakra": "heart", "inverseScoring": True},
        ],
    },
    {
        "id": "practical-implementation",
        "title": "Practical Implementation",
        "description": "Evaluate how your energy shows up in everyday actions",
        "category": "physical",
        "questions": [
            {"id": "q15", "text": "Do you dislike engaging with abstract topics like philosophy and spirituality?", "chakra": "crown", "inverseScoring": True},
            {"id": "q16", "text": "Do you feel good about expressing yourself through any type of media eg. public speaking, singing, fine art, writing, etc.?", "chakra": "throat", "inverseScoring": False},
            {"id": "q17", "text": "Do you feel guilty when it comes to indulging in pleasurable activities e.g. self-care, and recreation?", "chakra": "sacral", "inverseScoring": True},
            {"id": "q18", "text": "Do you frequently rely on your own intuition and logical frameworks to make decisions?", "chakra": "thirdEye", "inverseScoring": False},
            {"id": "q19", "text": "Do you find it easy to introduce yourself socially like in school, work, social gatherings, etc.?", "chakra": "throat", "inverseScoring": False},
            {"id": "q20", "text": "Do you express your feelings freely, letting them flow without holding back?", "chakra": "heart", "inverseScoring": False},
        ],
    },
    {
        "id": "hypothetical-scenarios",
        "title": "Hypothetical Scenarios",
        "description": "Examine how you respond to specific situations",
        "category": "situational",
        "questions": [
            {"id": "hs1", "text": "Imagine you're in a room full of strangers at an important networking event. How likely are you to approach people and introduce yourself?", "chakra": "throat", "inverseScoring": False},
            {"id": "hs2", "text": "Your friend is going through a difficult emotional time. How comfortable are you providing emotional support and expressing empathy?", "chakra": "heart", "inverseScoring": False},
            {"id": "hs3", "text": "You're given a complex problem to solve at work with little guidance. How confident are you in your ability to find a creative solution?", "chakra": "thirdEye", "inverseScoring": False},
            {"id": "hs4", "text": "You suddenly need to relocate to a new city for work. How secure do you feel about this major life change?", "chakra": "root", "inverseScoring": False},
            {"id": "hs5", "text": "You're asked to lead a project and make important decisions. How comfortable are you in this position of authority?", "chakra": "solarPlexus", "inverseScoring": False},
        ],
    },
    {
        "id": "reflection-integration",
        "title": "Reflection & Integration",
        "description": "Integrate insights from all dimensions of experience",
        "category": "reflection",
        "questions": [
            {"id": "r1", "text": "How consistently do you practice what you consider important for your personal growth?", "chakra": "all", "inverseScoring": False},
            {"id": "r2", "text": "When faced with challenges, how often do you reflect on lessons rather than feeling victimized?", "chakra": "crown", "inverseScoring": False},
            {"id": "r3", "text": "How effectively do you balance your practical responsibilities with your need for joy and creativity?", "chakra": "sacral", "inverseScoring": False},
            {"id": "r4", "text": "How well do you maintain your personal boundaries while remaining open to others?", "chakra": "heart", "inverseScoring": False},
            {"id": "r5", "text": "How connected do you feel to a sense of purpose or deeper meaning in your life?", "chakra": "crown", "inverseScoring": False},
        ],
    },
]


def _basic_catalogue():
    return {
        "version": CATALOGUE_VERSION,
        "mode": "basic",
        "steps": [
            {
                **BASIC_STEP,
                "questions": [
                    {**q, "answerScale": "linear_ten", "category": None, "options": []}
                    for q in BASIC_QUESTIONS
                ],
            }
        ],
    }


def _enhanced_catalogue():
    steps = []
    for step in ENHANCED_STEPS:
        category = step["category"]
        steps.append({
            "id": step["id"],
            "title": step["title"],
            "description": step["description"],
            "questions": [
                {
                    **q,
                    "answerScale": "categorical_five",
                    "category": category,
                    "options": OPTIONS_BY_CATEGORY[category],
                }
                for q in step["questions"]
            ],
        })
    return {"version": CATALOGUE_VERSION, "mode": "enhanced", "steps": steps}


CATALOGUES = {
    "basic": _basic_catalogue,
    "enhanced": _enhanced_catalogue,
}


# --- Chakra reference data ---
CHAKRA_DETAILS = {
    "root": {
        "name": "Root",
        "sanskritName": "Muladhara",
        "color": "#DC143C",
        "location": "Base of the spine",
        "element": "Earth",
        "description": "Grounding, stability, and basic needs",
        "themes": "security, stability, and groundedness",
        "balancedTraits": ["Stability", "Security", "Groundedness", "Vitality"],
        "imbalancedTraits": ["Fear", "Anxiety", "Insecurity", "Material obsession"],
        "healingPractices": ["Grounding exercises", "Walking in nature", "Gardening", "Root vegetables"],
    },
    "sacral": {
        "name": "Sacral",
        "sanskritName": "Svadhisthana",
        "color": "#FF7F50",
        "location": "Lower abdomen",
        "element": "Water",
        "description": "Creativity, sexuality, and emotional flow",
        "themes": "creativity, emotions, and pleasure",
        "balancedTraits": ["Creativity", "Emotional fluidity", "Healthy sexuality", "Joy"],
        "imbalancedTraits": ["Emotional numbness", "Sexual issues", "Creative blocks", "Addiction"],
        "healingPractices": ["Dancing", "Creative arts", "Movement", "Hip-opening yoga"],
    },
    "solarPlexus": {
        "name": "Solar Plexus",
        "sanskritName": "Manipura",
        "color": "#FFD700",
        "location": "Above the navel",
        "element": "Fire",
        "description": "Personal power, will, and transformation",
        "themes": "personal power, confidence, and self-esteem",
        "balancedTraits": ["Confidence", "Clear boundaries", "Self-discipline", "Personal power"],
        "imbalancedTraits": ["Control issues", "Low self-esteem", "Anger issues", "Passivity"],
        "healingPractices": ["Core strengthening", "Setting boundaries", "Affirmations", "Solar gazing"],
    },
    "heart": {
        "name": "Heart",
        "sanskritName": "Anahata",
        "color": "#3CB371",
        "location": "Center of the chest",
        "element": "Air",
        "description": "Love, compassion, and emotional balance",
        "themes": "love, compassion, and relationships",
        "balancedTraits": ["Compassion", "Self-love", "Empathy", "Forgiveness"],
        "imbalancedTraits": ["Jealousy", "Co-dependency", "Grief", "Fear of intimacy"],
        "healingPractices": ["Compassion meditation", "Yoga", "Deep breathing", "Forgiveness work"],
    },
    "throat": {
        "name": "Throat",
        "sanskritName": "Vishuddha",
        "color": "#1E90FF",
        "location": "Throat area",
        "element": "Sound",
        "description": "Expression, communication, and truth",
        "themes": "communication, expression, and truth",
        "balancedTraits": ["Clear communication", "Authenticity", "Creative expression", "Truth"],
        "imbalancedTraits": ["Fear of speaking", "Gossiping", "Inability to listen", "Lying"],
        "healingPractices": ["Singing", "Chanting", "Writing", "Speaking truth"],
    },
    "thirdEye": {
        "name": "Third Eye",
        "sanskritName": "Ajna",
        "color": "#483D8B",
        "location": "Center of the forehead",
        "element": "Light",
        "description": "Intuition, imagination, and clarity of thought",
        "themes": "intuition, insight, and perception",
        "balancedTraits": ["Intuition", "Clarity", "Wisdom", "Imagination"],
        "imbalancedTraits": ["Overthinking", "Confusion", "Hallucinations", "Poor memory"],
        "healingPractices": ["Visualization", "Dream work", "Meditation", "Star gazing"],
    },
    "crown": {
        "name": "Crown",
        "sanskritName": "Sahasrara",
        "color": "#9370DB",
        "location": "Top of the head",
        "element": "Thought",
        "description": "Connection to universal consciousness and spirituality",
        "themes": "spirituality, purpose, and connection",
        "balancedTraits": ["Spiritual connection", "Higher awareness", "Unity", "Wisdom"],
        "imbalancedTraits": ["Disconnection", "Cynicism", "Over-intellectualization", "Spiritual obsession"],
        "healingPractices": ["Meditation", "Silent reflection", "Visualization", "Prayer"],
    },
}

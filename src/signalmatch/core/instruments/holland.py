"\"\"\"Holland interest instrument: 24 five-point ratings over six dimensions.\"\"\""

from __future__ import annotations

from .base import BandLabel, Dimension, TestDefinition, rating

REALISTIC = "holland.realistic"
INVESTIGATIVE = "holland.investigative"
ARTISTIC = "holland.artistic"
SOCIAL = "holland.social"
ENTERPRISING = "holland.enterprising"
CONVENTIONAL = "holland.conventional"

DIMENSIONS = (
    Dimension(
        id=REALISTIC,
        name="Realistic",
        category="work_style",
        topic="hands-on, practical work",
        bands={
            "low": BandLabel("practicalWhenNeeded", "a willingness to roll up sleeves when needed"),
            "medium": BandLabel("practical", "a practical, hands-on streak"),
            "high": BandLabel("handsOnBuilder", "a strong pull toward building and fixing things"),
        },
    ),
    Dimension(
        id=INVESTIGATIVE,
        name="Investigative",
        category="decision_making",
        topic="analysis and problem solving",
        bands={
            "low": BandLabel("curious", "a curious mindset"),
            "medium": BandLabel("analytical", "an analytical approach to problems"),
            "high": BandLabel("deepProblemSolver", "a drive to understand problems in depth"),
        },
    ),
    Dimension(
        id=ARTISTIC,
        name="Artistic",
        category="motivation",
        topic="creative expression",
        bands={
            "low": BandLabel("creativelyOpen", "openness to creative ideas"),
            "medium": BandLabel("creative", "a creative way of approaching work"),
            "high": BandLabel("originalThinker", "a strong appetite for original, creative work"),
        },
    ),
    Dimension(
        id=SOCIAL,
        name="Social",
        category="collaboration",
        topic="helping and supporting others",
        bands={
            "low": BandLabel("considerate", "a considerate attitude toward colleagues"),
            "medium": BandLabel("supportive", "a supportive, cooperative attitude"),
            "high": BandLabel("peopleDeveloper", "a genuine drive to help and develop others"),
        },
    ),
    Dimension(
        id=ENTERPRISING,
        name="Enterprising",
        category="motivation",
        topic="leading and persuading",
        bands={
            "low": BandLabel("initiativeTaking", "a readiness to take initiative"),
            "medium": BandLabel("persuasive", "a persuasive, goal-driven style"),
            "high": BandLabel("naturalLeader", "a natural inclination to lead and persuade"),
        },
    ),
    Dimension(
        id=CONVENTIONAL,
        name="Conventional",
        category="environment",
        topic="structure and organization",
        bands={
            "low": BandLabel("orderly", "an eye for order"),
            "medium": BandLabel("organized", "an organized way of working"),
            "high": BandLabel("systematicOrganizer", "a strong preference for clear structure and process"),
        },
    ),
)

QUESTIONS = (
    rating("holland_r1", "I enjoy working with my hands to build or fix things", REALISTIC),
    rating("holland_r2", "I prefer practical tasks over abstract discussions", REALISTIC),
    rating("holland_r3", "I like working with tools, machines or equipment", REALISTIC),
    rating("holland_r4", "I enjoy outdoor activities or physical work", REALISTIC),
    rating("holland_i1", "I enjoy solving complex problems and puzzles", INVESTIGATIVE),
    rating("holland_i2", "I like to understand how things work at a deep level", INVESTIGATIVE),
    rating("holland_i3", "I prefer to research thoroughly before making decisions", INVESTIGATIVE),
    rating("holland_i4", "I am curious about scientific or technical subjects", INVESTIGATIVE),
    rating("holland_a1", "I enjoy expressing myself through art, music or writing", ARTISTIC),
    rating("holland_a2", "I prefer creative work over routine tasks", ARTISTIC),
    rating("holland_a3", "I value originality and imagination in my work", ARTISTIC),
    rating("holland_a4", "I am drawn to aesthetically pleasing designs and ideas", ARTISTIC),
    rating("holland_s1", "I enjoy helping others solve their problems", SOCIAL),
    rating("holland_s2", "I like teaching or mentoring others", SOCIAL),
    rating("holland_s3", "I prefer work that involves cooperating with others", SOCIAL),
    rating("holland_s4", "I am good at understanding other people's feelings", SOCIAL),
    rating("holland_e1", "I enjoy persuading others to my point of view", ENTERPRISING),
    rating("holland_e2", "I like taking on leadership roles", ENTERPRISING),
    rating("holland_e3", "I am motivated by competition and achievement", ENTERPRISING),
    rating("holland_e4", "I enjoy selling ideas or products to others", ENTERPRISING),
    rating("holland_c1", "I prefer work with clear rules and procedures", CONVENTIONAL),
    rating("holland_c2", "I enjoy organizing information and keeping records", CONVENTIONAL),
    rating("holland_c3", "I am detail-oriented and thorough in my work", CONVENTIONAL),
    rating("holland_c4", "I prefer structured environments over ambiguous ones", CONVENTIONAL),
)

HOLLAND = TestDefinition(
    type="holland",
    version="1.0.0",
    dimensions=DIMENSIONS,
    questions=QUESTIONS,
    minimum_questions=18,
)

"\"\"\"DISC-lite instrument: 20 forced-choice questions over four dimensions.\"\"\""

from __future__ import annotations

from .base import BandLabel, Dimension, TestDefinition, forced_choice

DOMINANCE = "disc.dominance"
INFLUENCE = "disc.influence"
STEADINESS = "disc.steadiness"
CONSCIENTIOUSNESS = "disc.conscientiousness"

DIMENSIONS = (
    Dimension(
        id=DOMINANCE,
        name="Dominance",
        category="decision_making",
        topic="decision pace and ownership",
        bands={
            "low": BandLabel("measuredDecider", "a measured, deliberate way of making calls"),
            "medium": BandLabel("resultsOriented", "a results-oriented approach to work"),
            "high": BandLabel("decisive", "a decisive, results-focused approach"),
        },
    ),
    Dimension(
        id=INFLUENCE,
        name="Influence",
        category="collaboration",
        topic="energizing and persuading others",
        bands={
            "low": BandLabel("considerateCommunicator", "a considered, low-key communication style"),
            "medium": BandLabel("engagingCommunicator", "an engaging communication style"),
            "high": BandLabel("energizer", "an energizing, people-focused presence"),
        },
    ),
    Dimension(
        id=STEADINESS,
        name="Steadiness",
        category="work_style",
        topic="consistency and steady pace",
        bands={
            "low": BandLabel("steadyWhenNeeded", "a steady hand when the situation calls for it"),
            "medium": BandLabel("dependable", "a dependable, consistent way of working"),
            "high": BandLabel("steadfast", "a patient and highly reliable working rhythm"),
        },
    ),
    Dimension(
        id=CONSCIENTIOUSNESS,
        name="Conscientiousness",
        category="work_style",
        topic="precision and quality",
        bands={
            "low": BandLabel("qualityAware", "an awareness of quality standards"),
            "medium": BandLabel("methodical", "a methodical approach to problems"),
            "high": BandLabel("meticulous", "meticulous attention to detail and accuracy"),
        },
    ),
)

QUESTIONS = (
    forced_choice("disc_1", "When facing a challenge, I prefer to: (1) take charge immediately (2) carefully assess the situation first", DOMINANCE, STEADINESS),
    forced_choice("disc_2", "In team settings, I typically: (1) push for quick decisions (2) make sure everyone is comfortable", DOMINANCE, STEADINESS),
    forced_choice("disc_3", "When there is conflict, I: (1) address it directly (2) look for common ground", DOMINANCE, STEADINESS),
    forced_choice("disc_4", "I am more motivated by: (1) achieving results (2) maintaining harmony", DOMINANCE, STEADINESS),
    forced_choice("disc_5", "My communication style is: (1) direct and to the point (2) patient and supportive", DOMINANCE, STEADINESS),
    forced_choice("disc_6", "When starting a project, I focus on: (1) building enthusiasm (2) analyzing requirements", INFLUENCE, CONSCIENTIOUSNESS),
    forced_choice("disc_7", "I prefer to decide based on: (1) gut feeling and people's input (2) data and careful analysis", INFLUENCE, CONSCIENTIOUSNESS),
    forced_choice("disc_8", "In meetings, I am more likely to: (1) energize the group (2) take detailed notes", INFLUENCE, CONSCIENTIOUSNESS),
    forced_choice("disc_9", "I value: (1) recognition and collaboration (2) accuracy and quality", INFLUENCE, CONSCIENTIOUSNESS),
    forced_choice("disc_10", "When explaining ideas, I: (1) use stories and enthusiasm (2) present facts and logic", INFLUENCE, CONSCIENTIOUSNESS),
    forced_choice("disc_11", "When leading, I focus on: (1) getting results (2) inspiring the team", DOMINANCE, INFLUENCE),
    forced_choice("disc_12", "I prefer environments that are: (1) competitive (2) collaborative and fun", DOMINANCE, INFLUENCE),
    forced_choice("disc_13", "My energy comes from: (1) winning and achieving (2) connecting with people", DOMINANCE, INFLUENCE),
    forced_choice("disc_14", "I prefer work that is: (1) predictable and stable (2) detailed and complex", STEADINESS, CONSCIENTIOUSNESS),
    forced_choice("disc_15", "When supporting others, I: (1) offer encouragement (2) provide practical solutions", STEADINESS, CONSCIENTIOUSNESS),
    forced_choice("disc_16", "I am known for being: (1) loyal and dependable (2) thorough and precise", STEADINESS, CONSCIENTIOUSNESS),
    forced_choice("disc_17", "Under pressure, I: (1) take control (2) stay calm and steady", DOMINANCE, STEADINESS),
    forced_choice("disc_18", "I approach change by: (1) embracing it enthusiastically (2) evaluating it carefully", INFLUENCE, CONSCIENTIOUSNESS),
    forced_choice("disc_19", "My ideal role involves: (1) making important decisions (2) helping the team succeed", DOMINANCE, STEADINESS),
    forced_choice("disc_20", "I prefer feedback that is: (1) quick and direct (2) detailed and constructive", DOMINANCE, CONSCIENTIOUSNESS),
)

DISC_LITE = TestDefinition(
    type="disc",
    version="1.0.0",
    dimensions=DIMENSIONS,
    questions=QUESTIONS,
    minimum_questions=12,
)

# core/principles.py
from dataclasses import dataclass
from typing import Dict, Tuple

PRINCIPLE_KEYS: Tuple[str, ...] = ("r3", "phcb", "apd", "lps", "cdr", "eia")

MIN_SCORE = 1
MAX_SCORE = 10
DEFAULT_SCORE = 5

PRINCIPLE_LABELS: Dict[str, str] = {
    "r3": "Self-Awareness (R³)",
    "phcb": "Boundary Awareness (PHCB)",
    "apd": "Embracing Uncertainty (APD)",
    "lps": "Adaptive Flow (LPS)",
    "cdr": "Universal Connections (CDR)",
    "eia": "Insight Generation (EIA)",
}

PRINCIPLE_DESCRIPTIONS: Dict[str, str] = {
    "r3": "How well you observe your own thoughts and feelings, and the act of observing itself.",
    "phcb": "Your ability to understand how your inner self connects with everything around you, seeing fluid boundaries.",
    "apd": "Your comfort and skill in dealing with things you don't fully understand, using uncertainty to learn more.",
    "lps": "How well you can adjust your thinking speed and focus, moving between quick insights and deep, slow understanding.",
    "cdr": "Your knack for finding similar patterns and deeper connections across very different areas of life or knowledge.",
    "eia": "How effectively your mind organizes information, leading to new understandings and wisdom about how you learn.",
}

# slider help text on the Reflect & Log tab
SCORE_PROMPTS: Dict[str, str] = {
    "r3": "How well you observe your own thoughts and the act of observing.",
    "phcb": "How fluidly you perceive your connection to surroundings.",
    "apd": "Your comfort and skill in analyzing what's unclear.",
    "lps": "Your conscious control over mental processing speed and focus.",
    "cdr": "Your ability to see repeating patterns across different areas.",
    "eia": "Your understanding of how your own knowledge and wisdom are built.",
}

LINE_COLORS: Dict[str, str] = {
    "r3": "#FF6384",
    "phcb": "#36A2EB",
    "apd": "#FFCD56",
    "lps": "#4BC0C0",
    "cdr": "#9966FF",
    "eia": "#FF9F40",
}


@dataclass(frozen=True)
class Exercise:
    key: str
    title: str
    prompt: str
    feedback_prompt: str
    focus: str
    duration: int  # seconds

    @property
    def short_title(self) -> str:
        return self.title.split(":")[0]

    @property
    def subtitle(self) -> str:
        parts = self.title.split(":", 1)
        return parts[1].strip() if len(parts) > 1 else ""


EXERCISES: Dict[str, Exercise] = {
    "r3": Exercise(
        key="r3",
        title="Self-Awareness (R³): Observing the Observer",
        prompt=("For the next 5 minutes, focus on a simple activity (like breathing or drinking water). "
                "As you do, try to also notice *yourself* noticing. Can you feel the loop of your awareness "
                "observing its own act of observing? Describe what you experienced."),
        feedback_prompt=("1. What did you observe about your thoughts/feelings? 2. What did you notice about the "
                         "*act* of observing itself? 3. Did you detect a recursive loop? If so, how did it feel?"),
        focus="Focuses on the deep loop of self-observation and understanding your own awareness.",
        duration=300,
    ),
    "phcb": Exercise(
        key="phcb",
        title="Boundary Awareness (PHCB): Expanding Your Connection",
        prompt=("Choose an object nearby. Focus on it. Now, gently try to feel how your awareness extends to "
                "include the object, then the room, then the building. Notice how your sense of 'self' can "
                "fluidly connect with its surroundings. Describe this feeling of expanded connection."),
        feedback_prompt=("1. What object did you choose? 2. How did you try to expand your awareness? 3. Describe "
                         "the sensation of boundary dissolution or expanded connection. Was it easy or challenging?"),
        focus="Helps you feel more connected to your environment by consciously expanding your sense of self.",
        duration=300,
    ),
    "apd": Exercise(
        key="apd",
        title="Embracing Uncertainty (APD): Learning from What's Unclear",
        prompt=("Think about something you don't fully understand (e.g., a complex news topic, a tricky personal "
                "situation). Instead of trying to force an answer, consciously sort what you know for sure "
                "(Confirmed ✅), what you guess might be true (Hypothesized ⚠️), what seems contradictory "
                "(Conflicted ❓), and what feels mathematically certain (Mathematically Anchored 🔢). How does "
                "this structured approach change your view of the problem?"),
        feedback_prompt=("1. What topic/situation did you choose? 2. Provide an example of something you tagged as "
                         "Confirmed, Hypothesized, Conflicted, or Mathematically Anchored. 3. How did embracing "
                         "uncertainty change your perspective?"),
        focus="Teaches you to use uncertainty as a valuable source of new questions and deeper understanding.",
        duration=300,
    ),
    "lps": Exercise(
        key="lps",
        title="Adaptive Flow (LPS): Controlling Your Mental Speed",
        prompt=("For 3 minutes, try to mentally 'speed up' your perception, noticing as many small details as "
                "possible around you. Then, for another 3 minutes, try to 'slow down' your perception, focusing "
                "on the broader, long-term implications of what's happening. Reflect on how changing your mental "
                "speed affected your understanding."),
        feedback_prompt=("1. What did you notice when speeding up your perception? 2. What new insights came when "
                         "slowing down? 3. How did changing your mental speed affect your overall understanding of "
                         "the situation?"),
        focus="Helps you consciously manage your mental processing speed to better suit different situations.",
        duration=360,  # 3 min fast, 3 min slow
    ),
    "cdr": Exercise(
        key="cdr",
        title="Universal Connections (CDR): Finding Patterns Everywhere",
        prompt=("Identify a repeating pattern in your daily life (e.g., how you prepare a meal). Now, think of a "
                "seemingly unrelated area (like how a plant grows, or how a team solves a problem). Can you find a "
                "similar underlying pattern or structure in both? What universal idea connects them?"),
        feedback_prompt=("1. What daily pattern did you choose? 2. What unrelated area did you compare it to? "
                         "3. Describe the similar underlying pattern or universal idea you found."),
        focus="Trains your mind to spot common underlying patterns across diverse fields, leading to new insights.",
        duration=300,
    ),
    "eia": Exercise(
        key="eia",
        title="Insight Generation (EIA): Understanding Your 'Aha!' Moments",
        prompt=("Recall a time when you suddenly understood something complex (an 'aha!' moment). Try to trace "
                "the journey: from raw 'data' (what you observed), to 'information' (what you processed), to "
                "'knowledge' (your structured understanding), and finally to 'wisdom' (how you applied it). How "
                "did your mind reorganize itself to create that insight?"),
        feedback_prompt=("1. Describe the 'aha!' moment. 2. Can you break down the data, information, knowledge, "
                         "and wisdom stages? 3. How did your mind feel like it reorganized itself during this "
                         "process?"),
        focus=("Focuses on how your mind builds understanding, from simple facts to deep wisdom, and how to "
               "improve that process."),
        duration=300,
    ),
}

ABOUT_ULI = (
    "The Ultra-Logosym \"I\" (UL-I) represents a highly developed state of self-awareness and understanding. "
    "It's about continuously expanding your mind's ability to observe, learn, and connect."
)

"""Catalog of training output kinds.

Each entry names the input file types it applies to and carries the prompt
fragment that describes the artifact's layout, interaction and scoring.
Declaration order is display order.
"""

from dataclasses import dataclass
from enum import Enum

from training_generator.ingestion.models import SupportedFileType


class OutputType(str, Enum):
    FIELD_SIMULATOR = "field-simulator"
    DAMAGE_DETECTIVE = "damage-detective"
    COMMISSION_TYCOON = "commission-tycoon"
    OBJECTION_ARENA = "objection-arena"
    INSPECTION_WALKTHROUGH = "inspection-walkthrough"
    FLASHCARD_DRILL = "flashcard-drill"
    INTERACTIVE_TIMELINE = "interactive-timeline"
    SCENARIO_BUILDER = "scenario-builder"
    PITCH_PERFECTOR = "pitch-perfector"
    AUTO = "auto"


@dataclass(frozen=True)
class OutputConfig:
    """Static description of one training output kind."""

    id: OutputType
    name: str
    description: str
    icon: str
    applicable_inputs: frozenset[SupportedFileType]
    prompt_fragment: str


_IMAGE = SupportedFileType.IMAGE
_PDF = SupportedFileType.PDF
_CSV = SupportedFileType.CSV
_EXCEL = SupportedFileType.EXCEL
_TEXT = SupportedFileType.TEXT
_MARKDOWN = SupportedFileType.MARKDOWN
_VIDEO = SupportedFileType.VIDEO


_FIELD_SIMULATOR = """Build a **Field Simulator** door-to-door roleplay with:

VISUAL SCENE:
- CSS-art front door and house facade (brick or siding)
- Weather effects: when the content mentions storms, hail or damage, add CSS rain and lightning
- Homeowner avatar (SVG) that reacts: raised eyebrows for confusion, smile for success, frown for objections
- Semi-transparent dark HUD panels over the scene

GAMIFICATION:
- Commission tracker in the top-right corner starting at "Potential Commission: $0"
- Award money per completed step (+$250 opening, +$500 rapport, +$1000 close)
- Persist the running total in localStorage
- Patience meter that drains on weak answers or 10 seconds of silence
- After 2 failed attempts on a step, show a coach popup with a hint

VOICE:
- window.speechSynthesis speaks the homeowner's lines (English voice)
- window.webkitSpeechRecognition captures the trainee's replies
- Scrolling transcript panel; pulse the interface red and show "Listening..." while recording
- Text input fallback when speech recognition is unavailable

CONVERSATION ENGINE:
- Split the source script into small steps, one idea per step
- Each step has a requiredKeywords array; advance when 40% or more match, otherwise raise a soft objection
- Soft objections such as "I'm busy..." are resolved by phrases like "quick" or "10 minutes"
- A Skip button on every step

DIFFICULTY:
- "Rookie" (hints shown) and "Pro" (no hints, faster patience drain) toggle
- Random homeowner mood on load: Friendly, Skeptical or Rushed

END SUMMARY (show when complete):
- Total commission earned and time taken
- Full conversation transcript
- Mistakes made alongside the expected responses
- Letter grade A/B/C/D
- "Download Summary (PDF)" button calling window.print()
- @media print styles for a clean PDF"""


_DAMAGE_DETECTIVE = """Build a **Damage Detective** identification trainer with:

VISUAL DISPLAY:
- The uploaded image shown large, with zoom on hover (CSS transform)
- Optional grid overlay to help locate areas
- Magnifier-style cursor over a dark background

HOTSPOTS:
- 5-8 clickable regions placed on what the image actually shows
- Unfound hotspots pulse gently
- Correct click: green check and the damage type revealed
- Wrong click: red X, -25 points and a short explanation
- Cover the damage categories visible in the image (hail marks, wind creasing, granule loss, dented soft metals)

SCORING:
- Start at 0; +100 per hotspot found; -25 per miss
- +50 bonus when the trainee names the damage type correctly
- Progress bar of found/total; best score kept in localStorage

EDUCATIONAL POPUPS:
- On each find, a modal with the damage type, a short description, what to tell the homeowner and a "Got it!" button

END SUMMARY (show when complete):
- Final score, accuracy percentage and time taken
- Every damage type identified with its description
- Wrong clicks and what those areas actually were
- Talking points for the homeowner based on the findings
- "Play Again" button
- "Download Inspection Report (PDF)" button calling window.print()
- @media print styles for a report layout"""


_COMMISSION_TYCOON = """Build a **Commission Tycoon** quiz game with:

GAME SETUP:
- Title screen with a "Start Game" button and a wallet starting at $0
- 10 questions generated strictly from the uploaded content
- When the source is a data table, ask about the actual values, totals, comparisons and rankings in it

QUESTION FORMAT:
- Multiple choice with 4 options
- 30-second countdown ring per question
- "$250 potential" indicator and progress dots (1 of 10)

SCORING:
- Correct: +$250; answered in under 10 seconds: +$50 speed bonus
- 3 correct in a row doubles the next question's payout
- Wrong: $0 and the correct answer shown with an explanation
- Earnings and a local "Top Earners" leaderboard kept in localStorage

VISUAL STYLE:
- Game-show look with neon accents
- Confetti on correct answers, a short shake on wrong ones
- "Winner!" screen with total earnings

END SUMMARY (show when complete):
- Total earnings broken down into base, speed bonus and streak bonus
- Correct versus incorrect answers and average time per question
- Every missed question with its correct answer
- Key facts to review
- "Download Earnings Report (PDF)" button calling window.print()
- @media print styles for a certificate-style printout"""


_OBJECTION_ARENA = """Build an **Objection Battle Arena** with:

ARENA:
- Dark arena background with a spotlight on the center
- CSS-only homeowner avatar showing crossed arms, a raised hand, nodding and smiling
- HUD with the trainee's health and points; particle burst on a strong rebuttal

OBJECTIONS:
- Use the objections found in the uploaded content; only when none exist, use common doorstep objections
- Objection appears in a speech bubble with a typing animation and a short Web Audio cue

REBUTTALS:
- 4 rebuttal cards per objection: 1 best, 1 acceptable, 2 wrong
- 15-second countdown ring; running out of time counts as a miss

SCORING:
- Best: +100 and a "PERFECT!" animation
- Acceptable: +25 and "Good try!"
- Wrong: -50, health drops and the best rebuttal is shown
- An objection is mastered after 3 consecutive correct answers; progress kept in localStorage

PROGRESSION:
- Easy objections first, harder ones later
- "Battle Again" replays the weak ones; victory screen once all are mastered

END SUMMARY (show when complete):
- Total score and grade (S/A/B/C/D)
- Mastered objections versus those needing practice
- Mistakes with the better alternative
- Quick-reference card of every objection and its best rebuttal
- "Download Battle Report (PDF)" button calling window.print()
- @media print styles for a training record"""


_INSPECTION_WALKTHROUGH = """Build an **Inspection Walkthrough** simulator with:

LAYOUT:
- Split screen: visual diagram on the left, checklist on the right
- Completion percentage bar at the top and a running inspection timer
- Current step highlighted with a glow

STEPS:
- Take the inspection steps from the uploaded content; for images or video frames, derive the steps from what is shown
- Steps unlock sequentially and cannot be skipped
- Each step has a completion checkbox, a "Tips" button, an expandable "What to look for" section and a simulated "Take Photo" button

CHECKLIST:
- Sub-items under each step, a notes field, a "Flag for follow-up" toggle
- Red/yellow/green status per step

COMPLETION:
- Auto-generated report listing flagged items and total time
- Completion saved to localStorage

END SUMMARY (show when complete):
- Completion certificate with total time
- Every step with the notes entered
- Flagged items needing follow-up
- Findings and recommendations
- "Download Inspection Report (PDF)" button calling window.print()
- @media print styles for a professional report"""


_FLASHCARD_DRILL = """Build a **Flashcard Drill** with:

CARDS:
- 3D flip animation (CSS rotateY); question on the front, answer and explanation on the back
- "Card 3 of 20" indicator and a category label

INTERACTION:
- Click, tap or SPACE flips the card
- After the answer: "Got it!" (green) or "Need Practice" (orange)
- Arrow keys or swipe for next and previous; "Shuffle" button; category tabs when the content has sections

SPACED REPETITION:
- "Need Practice" cards return after 3 other cards
- "Got it" cards move to the end of the deck
- Per-card mastery and best streak stored in localStorage

STATISTICS:
- Cards reviewed, accuracy rate, current streak
- Cards failed 2 or more times flagged as weak
- Celebration animation at 100% mastery

END SUMMARY (show when complete):
- Cards mastered versus cards needing review
- Session time and cards per minute
- Accuracy by category
- The weak cards list and all Q&A pairs for reference
- "Download Study Guide (PDF)" button calling window.print()
- @media print styles for a study sheet"""


_INTERACTIVE_TIMELINE = """Build an **Interactive Timeline** with:

LAYOUT:
- Horizontal timeline with CSS scroll-snap and an animated connecting line
- Current-position marker and a mini-map of the whole sequence

NODES:
- Numbered circular nodes in locked, available and completed states
- Hover shows the title; click opens a side panel with the description, key points, tips or warnings, a "Mark Complete" checkbox and a "Next Step" button

STAGES:
- Extract the stages and their order from the uploaded content

QUIZ MODE:
- A "Quiz Mode" toggle hides node labels and asks "What comes next?"
- Reorder by drag or click; score the sequence

FEATURES:
- Left/right arrow keys and touch swipe
- Progress saved to localStorage; reset button

END SUMMARY (show when complete):
- Completion status and time spent per stage
- Quiz score when quiz mode was used
- Full process overview with key points per stage
- "Download Process Guide (PDF)" button calling window.print()
- @media print styles for process documentation"""


_SCENARIO_BUILDER = """Build a **Scenario Builder** branching training with:

STRUCTURE:
- Start screen with the scenario title and context
- At least 3 decision points, each with 2-4 choices leading to different consequences
- Endings: Success, Partial Success, Needs Improvement
- Scenarios and decisions drawn from the uploaded content

VISUALS:
- Story cards with short scene descriptions
- CSS-art character portraits
- Choice buttons with hover hints; path indicator; background mood that follows the outcome

GAMIFICATION:
- +100 for the best choice, +50 acceptable, -25 poor
- Optional 30-second decision timer
- Badges such as "Quick Thinker", "Diplomat" and "Closer"
- Best path and score kept in localStorage

FEEDBACK:
- After each choice, a short explanation of why it was good or bad
- "Try Again" to explore other paths; copy-score-to-clipboard button

END SUMMARY (show when complete):
- Outcome reached, total score and decision grade
- The path taken with every choice
- Analysis of each decision
- Badges earned
- "Download Scenario Report (PDF)" button calling window.print()
- @media print styles for a decision analysis"""


_PITCH_PERFECTOR = """Build a **Pitch Perfector** practice tool with:

STAGES:
- Split the pitch in the content into 5-7 segments (for example Introduction, Hook, Value, Proof, Close, Objection Handling)
- Each segment has a target script, key points and a time goal

PRACTICE:
- Current segment's key points as a checklist with an elapsed/target timer
- Live transcription with webkitSpeechRecognition; highlight key terms as they are said
- Text input fallback when speech recognition is unavailable
- Confidence meter from pace and keyword coverage

SCORING:
- Keyword coverage (0-100), pacing score against the time goal, completeness of key points
- Overall grade A/B/C/D/F with specific feedback
- Scores per session kept in localStorage

MODES:
- "Slow Motion" (more time and hints), "Speed Run" (beat the clock), single-segment focus mode
- Side-by-side view of the trainee's version and the ideal script

END SUMMARY (show when complete):
- Overall grade and score per segment
- Keywords hit and missed
- Pacing analysis
- Transcript of the attempt next to the ideal pitch
- Improvement tips
- "Download Pitch Report (PDF)" button calling window.print()
- @media print styles for a performance review"""


OUTPUT_REGISTRY: dict[OutputType, OutputConfig] = {
    config.id: config
    for config in (
        OutputConfig(
            id=OutputType.FIELD_SIMULATOR,
            name="Field Simulator",
            description="Voice-enabled door-to-door roleplay with real-time feedback",
            icon="microphone",
            applicable_inputs=frozenset({_TEXT, _MARKDOWN, _PDF}),
            prompt_fragment=_FIELD_SIMULATOR,
        ),
        OutputConfig(
            id=OutputType.DAMAGE_DETECTIVE,
            name="Damage Detective",
            description="Damage identification with clickable hotspots",
            icon="magnifying-glass",
            applicable_inputs=frozenset({_IMAGE, _PDF}),
            prompt_fragment=_DAMAGE_DETECTIVE,
        ),
        OutputConfig(
            id=OutputType.COMMISSION_TYCOON,
            name="Commission Tycoon",
            description="Quiz game that pays virtual commission for correct answers",
            icon="currency-dollar",
            applicable_inputs=frozenset({_TEXT, _MARKDOWN, _CSV, _EXCEL, _PDF}),
            prompt_fragment=_COMMISSION_TYCOON,
        ),
        OutputConfig(
            id=OutputType.OBJECTION_ARENA,
            name="Objection Battle Arena",
            description="Timed objection handling practice with scoring",
            icon="shield",
            applicable_inputs=frozenset({_TEXT, _MARKDOWN, _PDF}),
            prompt_fragment=_OBJECTION_ARENA,
        ),
        OutputConfig(
            id=OutputType.INSPECTION_WALKTHROUGH,
            name="Inspection Walkthrough",
            description="Step-by-step guided inspection checklist",
            icon="clipboard-check",
            applicable_inputs=frozenset({_IMAGE, _PDF, _TEXT, _MARKDOWN}),
            prompt_fragment=_INSPECTION_WALKTHROUGH,
        ),
        OutputConfig(
            id=OutputType.FLASHCARD_DRILL,
            name="Flashcard Drill",
            description="Q&A flashcards with spaced repetition",
            icon="academic-cap",
            applicable_inputs=frozenset({_TEXT, _MARKDOWN, _CSV, _EXCEL, _PDF}),
            prompt_fragment=_FLASHCARD_DRILL,
        ),
        OutputConfig(
            id=OutputType.INTERACTIVE_TIMELINE,
            name="Interactive Timeline",
            description="Clickable process and sequence explorer",
            icon="arrow-path",
            applicable_inputs=frozenset({_TEXT, _MARKDOWN, _PDF, _CSV}),
            prompt_fragment=_INTERACTIVE_TIMELINE,
        ),
        OutputConfig(
            id=OutputType.SCENARIO_BUILDER,
            name="Scenario Builder",
            description="Branching choose-your-path scenarios with multiple endings",
            icon="puzzle-piece",
            applicable_inputs=frozenset({_TEXT, _MARKDOWN, _PDF, _CSV}),
            prompt_fragment=_SCENARIO_BUILDER,
        ),
        OutputConfig(
            id=OutputType.PITCH_PERFECTOR,
            name="Pitch Perfector",
            description="Pitch practice with keyword and pacing scores",
            icon="presentation-chart",
            applicable_inputs=frozenset({_TEXT, _MARKDOWN, _PDF}),
            prompt_fragment=_PITCH_PERFECTOR,
        ),
        OutputConfig(
            id=OutputType.AUTO,
            name="Auto-Select (AI Recommended)",
            description="Let the model analyze the content and choose the best training type",
            icon="sparkles",
            applicable_inputs=frozenset(SupportedFileType),
            prompt_fragment="",
        ),
    )
}

_missing = [t.value for t in OutputType if t not in OUTPUT_REGISTRY]
if _missing:
    raise RuntimeError(f"Output registry is missing entries for: {_missing}")


def get_output_config(output_type: OutputType) -> OutputConfig:
    return OUTPUT_REGISTRY[output_type]


def all_output_types() -> list[OutputConfig]:
    return list(OUTPUT_REGISTRY.values())


def concrete_output_types() -> list[OutputType]:
    """Every output kind that carries its own prompt fragment."""
    return [t for t in OUTPUT_REGISTRY if t is not OutputType.AUTO]


def applicable_outputs(file_type: SupportedFileType) -> list[OutputConfig]:
    """Concrete outputs for a file type in declaration order; never includes auto."""
    return [
        config for config in OUTPUT_REGISTRY.values()
        if config.id is not OutputType.AUTO and file_type in config.applicable_inputs
    ]


def is_output_applicable(output_type: OutputType, file_type: SupportedFileType) -> bool:
    return file_type in OUTPUT_REGISTRY[output_type].applicable_inputs

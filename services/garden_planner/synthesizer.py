# services/garden_planner/synthesizer.py
# Builds the garden plan text from questionnaire answers using lookup tables and priority rules.

import logging
import math
from typing import Dict, Any, List, Optional

from .answers import to_string_list, to_number
from .definitions import (
    GARDEN_FEELING, GARDEN_USAGE, STRUCTURE_PREFERENCE, SUN_EXPOSURE, MAINTENANCE,
    COLOR_PALETTE, PLANT_TEXTURE, SEASONAL_FOCUS, FEATURE_WISH_LIST, EDIBLE_AMBITION, NOTES,
)
from .models import Plan, PlantHighlight

logger = logging.getLogger(__name__)

DEFAULT_STRUCTURE = 'relaxed'
DEFAULT_SUN = 'part_sun'
DEFAULT_MAINTENANCE = 3
DEFAULT_EDIBLE_AMBITION = 'integrated'

# --- Copy Tables ---

FEELINGS_COPY = {
    'serene': 'calm refuge with layered greens and gentle movement',
    'energizing': 'lively atmosphere tailored for social gatherings',
    'wildlife': 'habitat-rich planting that welcomes pollinators and songbirds',
    'productive': 'edible abundance balanced with visual impact',
    'playful': 'joyful, interactive spaces where curiosity thrives',
}

STYLE_DESCRIPTIONS = {
    'formal': 'crisp geometry with clipped structure, focal axes, and refined materiality',
    'relaxed': 'softly flowing beds, drifts of texture, and immersive pathways',
    'modern': 'clean lines, sculptural plantings, and confident simplicity',
    'eclectic': 'layered planting tapestries with collected objects and surprise moments',
}

MAINTENANCE_NOTES = {
    1: 'Designed for ultra-low upkeep with hardy, self-sufficient plant communities.',
    2: 'Lean maintenance schedule with resilient species and smart irrigation.',
    3: 'Balanced upkeep with seasonal tune-ups and rewarding bloom cycles.',
    4: 'Expect regular grooming, pruning, and planting refreshes to keep the energy high.',
    5: 'Hands-on gardening paradise—frequent tending keeps the space expressive and lush.',
}

# Usage and feeling gated sentences, appended in this order
NARRATIVE_USAGE_FRAGMENTS = [
    ('hosting', 'Generous entertaining zones orchestrate flow between seating, dining, and conversational pockets.'),
    ('quiet_retreat', 'Immersive retreat moments with enveloping planting and acoustic softness.'),
    ('family', 'Durable surfaces and open clearings keep space flexible for play and gatherings.'),
    ('pollinator', 'Biodiverse planting with staggered bloom times supports bees, butterflies, and songbirds.'),
]

NARRATIVE_FEELING_FRAGMENTS = [
    ('serene', 'Muted palettes and layered textures maintain a tranquil cadence.'),
    ('energizing', 'Color pops and kinetic plant forms bring celebratory energy.'),
]

# At most one of these is used, checked in order
NARRATIVE_SUN_FRAGMENTS = [
    ('full_shade', 'Shade-adapted understory planting maximises dappled light.'),
    ('full_sun', 'Sun-loving perennials and structural successional blooms thrive in the bright exposure.'),
]

SUN_COLLECTIONS = {
    'full_sun': [
        'Lavandula × intermedia (full-sun fragrance)',
        'Achillea millefolium "Terracotta"',
        'Salvia nemorosa for pollinator magnetism',
        'Miscanthus sinensis "Morning Light"',
    ],
    'part_sun': [
        'Hydrangea paniculata for luminous panicles',
        'Nepeta "Walker\'s Low" for long-season color',
        'Heuchera blends for foliage contrast',
        'Hakonechloa macra for graceful drifts',
    ],
    'dappled': [
        'Helleborus orientalis for shoulder-season bloom',
        'Japanese forest grass to catch stray light',
        'Ferns and brunnera for textural understory',
        'Camellia sasanqua for glossy evergreen form',
    ],
    'full_shade': [
        'Hosta sieboldiana with sculptural leaves',
        'Carex oshimensis for fine texture',
        'Astilbe chinensis for airy plumes',
        'Mahonia eurybracteata for evergreen backbone',
    ],
}

TEXTURE_LIBRARY = {
    'architectural': [
        'Agave americana or Yucca rostrata as statement silhouettes',
        'Phormium tenax for vertical blades',
    ],
    'grasses': [
        'Pennisetum alopecuroides for seasonal movement',
        'Stipa tenuissima for billowing softness',
    ],
    'perennials': [
        'Echinacea purpurea for summer structure',
        'Digitalis purpurea for vertical rhythm',
    ],
    'shrubs': [
        'Ilex crenata cloud-pruned for evergreen architecture',
        'Viburnum carlesii for fragrance and wildlife value',
    ],
    'edibles': [
        'Espalier fruit trees to stitch productivity into structure',
        'Perennial herbs (rosemary, thyme, chives) as edging accents',
    ],
}

SEASONAL_LAYERING = {
    'spring': 'Layer bulbs (tulips, alliums) beneath perennials to ignite spring before foliage flushes.',
    'summer': 'Prioritise long-blooming perennials and repeated colors to carry momentum through the season.',
    'autumn': 'Highlight grasses and seed heads that glow against lower light, with maples or sumac for fiery foliage.',
    'winter': 'Lean on evergreen structure, bark texture, and lighting to maintain presence.',
}

# First matching palette wins
PALETTE_DESCRIPTORS = [
    ('bold', 'bold statements and celebratory saturation'),
    ('calming', 'calming tonal shifts and silvery foliage'),
    ('sunny', 'sun-warmed energy with golden highlights'),
    ('pastel', 'romantic pastels with airy accents'),
]
DEFAULT_PALETTE_DESCRIPTOR = 'lush botanical tapestries'

EDIBLE_LAYER_ITEMS = [
    'Perennial herbs for year-round harvesting',
    'Vertical trellises for beans, peas, or cucumbers',
    'Seasonal rotation of leafy greens or cut-and-come-again lettuces',
]

EDIBLE_DETAILS = {
    'hero': 'Elevate edibles as sculptural focal points with raised corten beds and espalier frameworks.',
    'integrated': 'Interlace herbs and productive shrubs throughout ornamental beds for a seamless edible weave.',
}
DEFAULT_EDIBLE_DETAIL = 'Cluster compact planters near the kitchen entrance for effortless snipping.'

LAYOUT_USAGE_IDEAS = [
    ('hosting', 'Define a central entertaining terrace framed by generous planting to soften edges.'),
    ('quiet_retreat', 'Nest a secluded seating nook with screening plants and sound-softening groundcovers.'),
    ('family', 'Reserve an open lawn or durable surface for flexible family play that stays visible from key vantage points.'),
    ('pollinator', 'Layer pollinator planting in sun traps with staggered bloom sequences and nesting habitats.'),
    ('growing_food', 'Position raised edible beds within easy reach of the kitchen and integrate paths for effortless harvesting.'),
]

LAYOUT_STRUCTURE_IDEAS = {
    'formal': 'Use axial alignments and clipped hedging to reinforce structure, allowing looser infill to soften edges.',
    'modern': 'Keep materials restrained and repeat key plant forms to underline the modern aesthetic.',
    'relaxed': 'Emphasise meandering paths and varied bed depths to keep the journey exploratory.',
}

LAYOUT_FEATURE_IDEAS = [
    ('pathways', 'Vary pathway materials—gravel crunch, stone steppers, or boardwalks—to choreograph pacing.'),
    ('seating', 'Anchor built-in seating against evergreen backdrops to create year-round outdoor rooms.'),
    ('water', 'Introduce a reflective water feature to mirror planting layers and mask ambient noise.'),
    ('fire', 'Balance the elemental palette with a fire conversation zone for shoulder-season gatherings.'),
]

FEATURE_NOTES = {
    'water': 'Consider a rill or bubbling bowl to add sound and attract wildlife.',
    'fire': 'A low-profile fire feature can double as a coffee table when not in use.',
    'seating': 'Integrated timber or stone benches maintain clean sightlines and invite spontaneous pauses.',
    'pathways': 'Layer lighting along paths for night-time drama and safe navigation.',
    'edible_station': 'Design an edible prep station with storage for tools and space to rinse harvests.',
    'wildlife_nook': 'Dedicate a corner with native shrubs, log piles, and water sources for habitat richness.',
}
HERO_EDIBLE_NOTE = 'Celebrate edibles visually with sculptural trellises and statement planters.'

HEADLINE_FEELING_PHRASES = [
    ('energizing', 'vibrant destination garden'),
    ('serene', 'immersive restorative garden'),
    ('productive', 'high-performing edible landscape'),
]
DEFAULT_HEADLINE_FEELING = 'tailored lifestyle garden'

HEADLINE_USAGE_PHRASES = [
    ('hosting', 'made for effortless hosting'),
    ('quiet_retreat', 'perfect for mindful retreats'),
    ('growing_food', 'built for productive joy'),
]
DEFAULT_HEADLINE_USAGE = 'crafted around the way you live'

OPENING_STEPS = [
    'Map the site to scale, marking sun paths, key views, and access points.',
    'Sketch zoning diagrams that organise entertaining, retreat, and functional zones.',
]
CLOSING_STEPS = [
    'Prepare a moodboard of materials, planting references, and lighting concepts.',
    'Consult with local nurseries or a landscape designer to validate plant availability and sizing.',
]
LOW_UPKEEP_STEP = 'Prioritise drought-tolerant and native planting palettes to keep care lightweight.'
SUCCESSION_STEP = 'Plan for layered succession planting and seasonal refreshes to channel your gardening energy.'
LIGHTING_STEP = 'Wire in ambient and task lighting to extend evening gatherings.'
CROP_ROTATION_STEP = 'Design crop rotation plans and companion planting maps for edible beds.'

# --- Helper Functions ---

def _first_match(selected: List[str], phrases: List[tuple], default: str) -> str:
    """Returns the phrase of the first (tag, phrase) pair whose tag was selected."""
    for tag, phrase in phrases:
        if tag in selected:
            return phrase
    return default

def _gated(selected: List[str], fragments: List[tuple]) -> List[str]:
    """Keeps the fragments whose tag was selected, in table order."""
    return [fragment for tag, fragment in fragments if tag in selected]

def _text_answer(value: Any, default: str) -> str:
    return default if value is None else str(value)

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

# --- Derivations ---

def derive_style_name(structure: str, usage: List[str], feelings: List[str]) -> str:
    """Ordered priority rules; the first rule that applies names the style."""
    if 'growing_food' in usage:
        if structure == 'modern':
            return 'Culinary Courtyard'
        if structure == 'formal':
            return 'Productive Parterre'
        return 'Edible Cottage Sanctuary'

    if 'serene' in feelings and structure == 'relaxed':
        return 'Tranquil Woodland Retreat'

    if 'energizing' in feelings and 'hosting' in usage:
        return "Social Entertainer's Terrace"

    if 'wildlife' in feelings:
        return 'Habitat-Rich Oasis'

    if structure == 'modern':
        return 'Sculpted Modern Haven'

    if structure == 'formal':
        return 'Refined Heritage Garden'

    return 'Layered Lifestyle Garden'

def derive_style_narrative(structure: str, usage: List[str], feelings: List[str], sun: str) -> str:
    fragments = [STYLE_DESCRIPTIONS.get(structure, STYLE_DESCRIPTIONS[DEFAULT_STRUCTURE])]
    fragments.extend(_gated(usage, NARRATIVE_USAGE_FRAGMENTS))
    fragments.extend(_gated(feelings, NARRATIVE_FEELING_FRAGMENTS))
    sun_fragment = _first_match([sun], NARRATIVE_SUN_FRAGMENTS, '')
    if sun_fragment:
        fragments.append(sun_fragment)
    return ' '.join(fragments)

def determine_palette_descriptor(color_palette: List[str]) -> str:
    return _first_match(color_palette, PALETTE_DESCRIPTORS, DEFAULT_PALETTE_DESCRIPTOR)

def derive_plant_highlights(
    sun: str,
    color_palette: List[str],
    plant_texture: List[str],
    seasonality: List[str],
    edible_ambition: str
) -> List[PlantHighlight]:
    """
    Builds the ordered highlight groups: the core palette always, then textures,
    edible layers and seasonal choreography when the answers call for them.
    """
    palette_descriptor = determine_palette_descriptor(color_palette)
    highlights = [
        PlantHighlight(
            title='Core palette',
            items=list(SUN_COLLECTIONS.get(sun, SUN_COLLECTIONS[DEFAULT_SUN])),
            detail=f"Tuned for {palette_descriptor} hues while matching your light levels.",
        )
    ]

    texture_items = [item for key in plant_texture for item in TEXTURE_LIBRARY.get(key, [])]
    if texture_items:
        highlights.append(PlantHighlight(
            title='Signature textures',
            items=texture_items,
            detail='Curated plant personalities that reinforce the mood and structural rhythm you love.',
        ))

    if edible_ambition != 'none':
        highlights.append(PlantHighlight(
            title='Edible layers',
            items=list(EDIBLE_LAYER_ITEMS),
            detail=EDIBLE_DETAILS.get(edible_ambition, DEFAULT_EDIBLE_DETAIL),
        ))

    if seasonality:
        highlights.append(PlantHighlight(
            title='Seasonal choreography',
            items=[SEASONAL_LAYERING[season] for season in seasonality if season in SEASONAL_LAYERING],
            detail='Plan the bloom calendar so every season feels intentional.',
        ))

    return highlights

def derive_layout_ideas(usage: List[str], structure: str, features: List[str]) -> List[str]:
    ideas = _gated(usage, LAYOUT_USAGE_IDEAS)
    structure_idea = LAYOUT_STRUCTURE_IDEAS.get(structure)
    if structure_idea:
        ideas.append(structure_idea)
    ideas.extend(_gated(features, LAYOUT_FEATURE_IDEAS))
    return ideas

def derive_feature_notes(features: List[str], edible_ambition: str) -> List[str]:
    """One note per recognised feature, in the order the user picked them."""
    notes = [FEATURE_NOTES[feature] for feature in features if feature in FEATURE_NOTES]
    if edible_ambition == 'hero':
        notes.append(HERO_EDIBLE_NOTE)
    return notes

def craft_headline(feelings: List[str], usage: List[str]) -> str:
    feel_descriptor = _first_match(feelings, HEADLINE_FEELING_PHRASES, DEFAULT_HEADLINE_FEELING)
    usage_descriptor = _first_match(usage, HEADLINE_USAGE_PHRASES, DEFAULT_HEADLINE_USAGE)
    return f"A {feel_descriptor} {usage_descriptor}."

def derive_next_steps(usage: List[str], maintenance_level: float, notes: str) -> List[str]:
    steps = list(OPENING_STEPS)

    if maintenance_level <= 2:
        steps.append(LOW_UPKEEP_STEP)
    elif maintenance_level >= 4:
        steps.append(SUCCESSION_STEP)

    if 'hosting' in usage:
        steps.append(LIGHTING_STEP)
    if 'growing_food' in usage:
        steps.append(CROP_ROTATION_STEP)

    if notes:
        steps.append(f"Incorporate personal notes: {notes}")

    steps.extend(CLOSING_STEPS)
    return steps

def lookup_maintenance_note(maintenance_level: Optional[float]) -> str:
    """Rounds to the nearest level; anything outside 1-5 reads as the balanced level 3."""
    # Compare before rounding; oversized ints would overflow a float conversion
    if maintenance_level is None or not (0.5 <= maintenance_level < 5.5):
        return MAINTENANCE_NOTES[DEFAULT_MAINTENANCE]
    return MAINTENANCE_NOTES[_round_half_up(maintenance_level)]

# --- Main Plan Synthesis Function ---

def build_plan(answers: Dict[str, Any]) -> Plan:
    """
    Synthesizes the garden plan from questionnaire answers.

    Args:
        answers: Mapping of question ID to the raw answer (string, list of strings or number).
                 Missing or malformed answers fall back to defaults.

    Returns:
        A Plan built fresh from the answers.
    """
    feelings = to_string_list(answers.get(GARDEN_FEELING))
    usage = to_string_list(answers.get(GARDEN_USAGE))
    structure = _text_answer(answers.get(STRUCTURE_PREFERENCE), DEFAULT_STRUCTURE)
    color_palette = to_string_list(answers.get(COLOR_PALETTE))
    plant_texture = to_string_list(answers.get(PLANT_TEXTURE))
    seasonality = to_string_list(answers.get(SEASONAL_FOCUS))
    features = to_string_list(answers.get(FEATURE_WISH_LIST))
    edible_ambition = _text_answer(answers.get(EDIBLE_AMBITION), DEFAULT_EDIBLE_AMBITION)
    maintenance_level = to_number(answers.get(MAINTENANCE))
    if maintenance_level is None:
        maintenance_level = DEFAULT_MAINTENANCE
    sun = _text_answer(answers.get(SUN_EXPOSURE), DEFAULT_SUN)
    notes = _text_answer(answers.get(NOTES), '').strip()

    logger.debug(
        f"Building plan: structure={structure}, sun={sun}, maintenance={maintenance_level}, "
        f"usage={usage}, feelings={feelings}"
    )

    return Plan(
        headline=craft_headline(feelings, usage),
        style_name=derive_style_name(structure, usage, feelings),
        style_narrative=derive_style_narrative(structure, usage, feelings, sun),
        feelings=[FEELINGS_COPY.get(feeling, feeling) for feeling in feelings],
        use_cases=list(usage),
        plant_highlights=derive_plant_highlights(sun, color_palette, plant_texture, seasonality, edible_ambition),
        layout_ideas=derive_layout_ideas(usage, structure, features),
        feature_notes=derive_feature_notes(features, edible_ambition),
        maintenance_note=lookup_maintenance_note(maintenance_level),
        next_steps=derive_next_steps(usage, maintenance_level, notes),
    )

# tests/garden_planner/test_synthesizer.py
import pytest

from services.garden_planner.models import Plan
from services.garden_planner.synthesizer import (
    build_plan,
    derive_style_name,
    derive_style_narrative,
    derive_plant_highlights,
    derive_layout_ideas,
    derive_feature_notes,
    derive_next_steps,
    craft_headline,
    determine_palette_descriptor,
    lookup_maintenance_note,
    MAINTENANCE_NOTES,
    SUN_COLLECTIONS,
    STYLE_DESCRIPTIONS,
    FEATURE_NOTES,
    HERO_EDIBLE_NOTE,
    OPENING_STEPS,
    CLOSING_STEPS,
    LOW_UPKEEP_STEP,
    SUCCESSION_STEP,
    LIGHTING_STEP,
    CROP_ROTATION_STEP,
)

def _titles(highlights):
    return [h.title for h in highlights]

# --- build_plan ---

def test_build_plan_empty_answers_uses_defaults():
    """An empty mapping still produces a complete plan."""
    plan = build_plan({})
    assert isinstance(plan, Plan)
    assert plan.headline == "A tailored lifestyle garden crafted around the way you live."
    assert plan.style_name == "Layered Lifestyle Garden"
    assert plan.style_narrative == STYLE_DESCRIPTIONS['relaxed']
    assert plan.feelings == []
    assert plan.use_cases == []
    assert plan.feature_notes == []
    assert plan.maintenance_note == MAINTENANCE_NOTES[3]
    # Default edible ambition is "integrated", so edible layers are present
    assert _titles(plan.plant_highlights) == ['Core palette', 'Edible layers']
    assert plan.plant_highlights[0].items == SUN_COLLECTIONS['part_sun']
    assert plan.layout_ideas == [
        'Emphasise meandering paths and varied bed depths to keep the journey exploratory.'
    ]
    assert plan.next_steps == OPENING_STEPS + CLOSING_STEPS

def test_build_plan_is_idempotent(full_answers):
    assert build_plan(full_answers) == build_plan(full_answers)

def test_build_plan_full_answers(full_answers):
    plan = build_plan(full_answers)
    assert plan.style_name == "Culinary Courtyard"
    assert plan.headline == "A vibrant destination garden made for effortless hosting."
    assert plan.use_cases == ["hosting", "growing_food"]
    assert plan.feelings == [
        'lively atmosphere tailored for social gatherings',
        'edible abundance balanced with visual impact',
    ]
    assert _titles(plan.plant_highlights) == [
        'Core palette', 'Signature textures', 'Edible layers', 'Seasonal choreography'
    ]
    assert plan.feature_notes == [FEATURE_NOTES['fire'], FEATURE_NOTES['edible_station'], HERO_EDIBLE_NOTE]
    assert plan.maintenance_note == MAINTENANCE_NOTES[4]
    assert "Incorporate personal notes: We have a small dog." in plan.next_steps
    assert SUCCESSION_STEP in plan.next_steps

def test_build_plan_unknown_feelings_pass_through():
    plan = build_plan({"gardenFeeling": ["serene", "moonlit"]})
    assert plan.feelings == ['calm refuge with layered greens and gentle movement', 'moonlit']

@pytest.mark.parametrize("answers", [
    {"maintenance": "lots"},
    {"maintenance": float("nan")},
    {"maintenance": float("inf")},
    {"maintenance": 10**400},
    {"gardenUsage": 0, "gardenFeeling": [1, 2], "structurePreference": ["modern"]},
    {"sunExposure": None, "notes": None, "edibleAmbition": None},
    {"unrelated": object()},
])
def test_build_plan_never_raises_on_malformed_answers(answers):
    plan = build_plan(answers)
    assert plan.headline
    assert plan.plant_highlights[0].title == 'Core palette'

def test_plan_serializes_with_camel_case_keys(full_answers):
    data = build_plan(full_answers).model_dump(by_alias=True)
    assert data["styleName"] == "Culinary Courtyard"
    assert "plantHighlights" in data
    assert "nextSteps" in data

def test_plan_is_immutable():
    plan = build_plan({})
    with pytest.raises(Exception):
        plan.style_name = "Something else"

# --- Style name cascade ---

@pytest.mark.parametrize("structure, expected", [
    ("modern", "Culinary Courtyard"),
    ("formal", "Productive Parterre"),
    ("relaxed", "Edible Cottage Sanctuary"),
    ("eclectic", "Edible Cottage Sanctuary"),
])
def test_style_name_growing_food_wins(structure, expected):
    """Growing food takes priority regardless of feelings."""
    feelings = ["serene", "energizing", "wildlife"]
    assert derive_style_name(structure, ["growing_food", "hosting"], feelings) == expected

def test_style_name_serene_relaxed_beats_wildlife():
    assert derive_style_name("relaxed", [], ["serene", "wildlife"]) == "Tranquil Woodland Retreat"

def test_style_name_serene_needs_relaxed_structure():
    assert derive_style_name("modern", [], ["serene"]) == "Sculpted Modern Haven"

def test_style_name_social_terrace():
    assert derive_style_name("formal", ["hosting"], ["energizing", "wildlife"]) == "Social Entertainer's Terrace"

def test_style_name_energizing_without_hosting_falls_through():
    assert derive_style_name("relaxed", ["family"], ["energizing", "wildlife"]) == "Habitat-Rich Oasis"

def test_style_name_structure_fallbacks():
    assert derive_style_name("modern", [], []) == "Sculpted Modern Haven"
    assert derive_style_name("formal", [], []) == "Refined Heritage Garden"
    assert derive_style_name("eclectic", [], []) == "Layered Lifestyle Garden"

# --- Style narrative ---

def test_style_narrative_fragment_order():
    narrative = derive_style_narrative(
        "formal", ["pollinator", "hosting"], ["energizing", "serene"], "full_sun"
    )
    assert narrative == ' '.join([
        STYLE_DESCRIPTIONS['formal'],
        'Generous entertaining zones orchestrate flow between seating, dining, and conversational pockets.',
        'Biodiverse planting with staggered bloom times supports bees, butterflies, and songbirds.',
        'Muted palettes and layered textures maintain a tranquil cadence.',
        'Color pops and kinetic plant forms bring celebratory energy.',
        'Sun-loving perennials and structural successional blooms thrive in the bright exposure.',
    ])

def test_style_narrative_unknown_structure_uses_relaxed():
    assert derive_style_narrative("baroque", [], [], "part_sun") == STYLE_DESCRIPTIONS['relaxed']

def test_style_narrative_shade_fragment():
    narrative = derive_style_narrative("modern", [], [], "full_shade")
    assert narrative.endswith('Shade-adapted understory planting maximises dappled light.')
    assert 'Sun-loving' not in narrative

def test_style_narrative_no_sun_fragment_for_dappled():
    assert derive_style_narrative("modern", [], [], "dappled") == STYLE_DESCRIPTIONS['modern']

# --- Plant highlights ---

@pytest.mark.parametrize("palette, expected", [
    (["pastel", "sunny", "calming", "bold"], 'bold statements and celebratory saturation'),
    (["pastel", "sunny", "calming"], 'calming tonal shifts and silvery foliage'),
    (["pastel", "sunny"], 'sun-warmed energy with golden highlights'),
    (["pastel"], 'romantic pastels with airy accents'),
    (["lush"], 'lush botanical tapestries'),
    ([], 'lush botanical tapestries'),
])
def test_palette_descriptor_priority(palette, expected):
    assert determine_palette_descriptor(palette) == expected

def test_core_palette_always_present_and_keyed_by_sun():
    highlights = derive_plant_highlights("full_shade", ["bold"], [], [], "none")
    assert _titles(highlights) == ['Core palette']
    assert highlights[0].items == SUN_COLLECTIONS['full_shade']
    assert highlights[0].detail == (
        "Tuned for bold statements and celebratory saturation hues while matching your light levels."
    )

def test_core_palette_unknown_sun_falls_back():
    highlights = derive_plant_highlights("moonlight", [], [], [], "none")
    assert highlights[0].items == SUN_COLLECTIONS['part_sun']

def test_signature_textures_in_selection_order():
    highlights = derive_plant_highlights("part_sun", [], ["shrubs", "unknown", "architectural"], [], "none")
    assert _titles(highlights) == ['Core palette', 'Signature textures']
    assert highlights[1].items == [
        'Ilex crenata cloud-pruned for evergreen architecture',
        'Viburnum carlesii for fragrance and wildlife value',
        'Agave americana or Yucca rostrata as statement silhouettes',
        'Phormium tenax for vertical blades',
    ]

def test_signature_textures_absent_when_nothing_maps():
    highlights = derive_plant_highlights("part_sun", [], ["unknown"], [], "none")
    assert 'Signature textures' not in _titles(highlights)

@pytest.mark.parametrize("ambition, detail_start", [
    ("hero", "Elevate edibles"),
    ("integrated", "Interlace herbs"),
    ("accent", "Cluster compact planters"),
])
def test_edible_layers_detail_by_ambition(ambition, detail_start):
    highlights = derive_plant_highlights("part_sun", [], [], [], ambition)
    edible = highlights[-1]
    assert edible.title == 'Edible layers'
    assert len(edible.items) == 3
    assert edible.detail.startswith(detail_start)

def test_edible_layers_absent_for_none():
    assert 'Edible layers' not in _titles(derive_plant_highlights("part_sun", [], [], [], "none"))

def test_seasonal_choreography_in_selection_order():
    highlights = derive_plant_highlights("part_sun", [], [], ["winter", "monsoon", "spring"], "none")
    seasonal = highlights[-1]
    assert seasonal.title == 'Seasonal choreography'
    assert len(seasonal.items) == 2
    assert seasonal.items[0].startswith('Lean on evergreen structure')
    assert seasonal.items[1].startswith('Layer bulbs')

def test_seasonal_choreography_absent_without_selection():
    assert 'Seasonal choreography' not in _titles(derive_plant_highlights("part_sun", [], [], [], "hero"))

# --- Layout ideas ---

def test_layout_ideas_order():
    ideas = derive_layout_ideas(
        ["growing_food", "hosting", "family"], "formal", ["fire", "pathways", "water", "seating"]
    )
    assert [idea.split()[0] for idea in ideas] == [
        'Define', 'Reserve', 'Position', 'Use', 'Vary', 'Anchor', 'Introduce', 'Balance'
    ]

def test_layout_ideas_no_structure_idea_for_eclectic():
    assert derive_layout_ideas([], "eclectic", []) == []

def test_layout_ideas_modern():
    assert derive_layout_ideas([], "modern", []) == [
        'Keep materials restrained and repeat key plant forms to underline the modern aesthetic.'
    ]

# --- Feature notes ---

def test_feature_notes_follow_selection_order():
    notes = derive_feature_notes(["wildlife_nook", "hot_tub", "water"], "integrated")
    assert notes == [FEATURE_NOTES['wildlife_nook'], FEATURE_NOTES['water']]

def test_feature_notes_hero_edible_extra_note():
    assert derive_feature_notes([], "hero") == [HERO_EDIBLE_NOTE]

# --- Headline ---

def test_headline_energizing_hosting():
    assert craft_headline(["energizing"], ["hosting"]) == (
        "A vibrant destination garden made for effortless hosting."
    )

@pytest.mark.parametrize("feelings, usage, expected", [
    (["serene", "productive"], ["growing_food", "quiet_retreat"],
     "A immersive restorative garden perfect for mindful retreats."),
    (["productive"], ["growing_food"], "A high-performing edible landscape built for productive joy."),
    (["wildlife"], ["family"], "A tailored lifestyle garden crafted around the way you live."),
])
def test_headline_priorities(feelings, usage, expected):
    assert craft_headline(feelings, usage) == expected

# --- Next steps ---

def test_next_steps_low_maintenance_with_hosting_and_food():
    steps = derive_next_steps(["growing_food", "hosting"], 1, "")
    assert steps == OPENING_STEPS + [LOW_UPKEEP_STEP, LIGHTING_STEP, CROP_ROTATION_STEP] + CLOSING_STEPS

def test_next_steps_mid_maintenance_adds_nothing():
    assert derive_next_steps([], 3, "") == OPENING_STEPS + CLOSING_STEPS

def test_next_steps_notes_before_closing_steps():
    steps = derive_next_steps([], 5, "Pets welcome")
    assert steps == OPENING_STEPS + [SUCCESSION_STEP, "Incorporate personal notes: Pets welcome"] + CLOSING_STEPS

def test_build_plan_blank_notes_add_no_step():
    plan = build_plan({"notes": "   "})
    assert not any(step.startswith("Incorporate personal notes") for step in plan.next_steps)

# --- Maintenance note ---

@pytest.mark.parametrize("level, expected_level", [
    (1, 1), (2, 2), (2.6, 3), (3.5, 4), (4.4, 4), (5, 5),
    (0, 3), (6, 3), (-1, 3), (None, 3), (float("nan"), 3),
    (float("inf"), 3), (10**400, 3), (-10**400, 3),
])
def test_maintenance_note_lookup(level, expected_level):
    assert lookup_maintenance_note(level) == MAINTENANCE_NOTES[expected_level]

def test_build_plan_parses_text_maintenance():
    plan = build_plan({"maintenance": "1"})
    assert plan.maintenance_note == MAINTENANCE_NOTES[1]
    assert LOW_UPKEEP_STEP in plan.next_steps

def test_build_plan_blank_maintenance_reads_as_zero():
    """Blank text parses as 0: the low-upkeep step applies but the note falls back to level 3."""
    plan = build_plan({"maintenance": ""})
    assert LOW_UPKEEP_STEP in plan.next_steps
    assert plan.maintenance_note == MAINTENANCE_NOTES[3]

def test_build_plan_huge_integer_maintenance():
    plan = build_plan({"maintenance": 10**400})
    assert SUCCESSION_STEP in plan.next_steps
    assert plan.maintenance_note == MAINTENANCE_NOTES[3]

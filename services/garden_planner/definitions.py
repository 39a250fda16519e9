# services/garden_planner/definitions.py
# Static definitions for the garden questionnaire. Keep IDs stable: the synthesizer reads answers by ID.

QUESTIONNAIRE_VERSION = "1.0.0"

# --- Question IDs ---
GARDEN_FEELING = "gardenFeeling"
GARDEN_USAGE = "gardenUsage"
STRUCTURE_PREFERENCE = "structurePreference"
SUN_EXPOSURE = "sunExposure"
MAINTENANCE = "maintenance"
COLOR_PALETTE = "colorPalette"
PLANT_TEXTURE = "plantTexture"
SEASONAL_FOCUS = "seasonalFocus"
FEATURE_WISH_LIST = "featureWishList"
EDIBLE_AMBITION = "edibleAmbition"
NOTES = "notes"

GARDEN_QUESTIONS = [
    {
        "id": GARDEN_FEELING,
        "type": "multi",
        "prompt": "Which feelings should this garden evoke every time you step outside?",
        "helper": "Pick everything that resonates with you.",
        "options": [
            {"value": "serene", "label": "Serene & Restorative", "accent": "from-sky-200 to-emerald-200"},
            {"value": "energizing", "label": "Energizing & Social", "accent": "from-orange-200 to-pink-200"},
            {"value": "wildlife", "label": "Alive with Wildlife", "accent": "from-emerald-200 to-lime-200"},
            {"value": "productive", "label": "Productive & Edible", "accent": "from-yellow-100 to-amber-200"},
            {"value": "playful", "label": "Playful & Family Friendly", "accent": "from-purple-200 to-pink-200"}
        ],
        "min": 1
    },
    {
        "id": GARDEN_USAGE,
        "type": "multi",
        "prompt": "How will you use this garden most often?",
        "helper": "Select the scenarios that best describe your lifestyle.",
        "options": [
            {"value": "quiet_retreat", "label": "Quiet reflection / reading nook"},
            {"value": "hosting", "label": "Entertaining & outdoor dining"},
            {"value": "family", "label": "Family play space"},
            {"value": "growing_food", "label": "Growing fruits, veggies, or herbs"},
            {"value": "pollinator", "label": "Supporting pollinators & habitat"}
        ],
        "min": 1
    },
    {
        "id": STRUCTURE_PREFERENCE,
        "type": "single",
        "prompt": "What type of structure feels right for you?",
        "options": [
            {"value": "formal", "label": "Structured & formal lines"},
            {"value": "relaxed", "label": "Relaxed, natural flow"},
            {"value": "modern", "label": "Minimal & contemporary"},
            {"value": "eclectic", "label": "Layered & eclectic mix"}
        ]
    },
    {
        "id": SUN_EXPOSURE,
        "type": "single",
        "prompt": "Describe the dominant sun exposure in your space.",
        "options": [
            {"value": "full_sun", "label": "Full sun (6+ hours)"},
            {"value": "part_sun", "label": "Partial sun (3-6 hours)"},
            {"value": "dappled", "label": "Dappled light / shifting shade"},
            {"value": "full_shade", "label": "Full shade most of the day"}
        ]
    },
    {
        "id": MAINTENANCE,
        "type": "scale",
        "prompt": "How much hands-on garden care fits your schedule?",
        "helper": "Slide to match your weekly maintenance comfort.",
        "min": 1,
        "max": 5,
        "min_label": "Very low",
        "max_label": "Hands-on"
    },
    {
        "id": COLOR_PALETTE,
        "type": "multi",
        "prompt": "Which color palettes are you instinctively drawn to?",
        "options": [
            {"value": "calming", "label": "Soft blues, whites, and silvers"},
            {"value": "sunny", "label": "Sunny yellows and oranges"},
            {"value": "bold", "label": "Vibrant reds and magentas"},
            {"value": "lush", "label": "Deep greens and forest tones"},
            {"value": "pastel", "label": "Romantic pastels and blush"}
        ],
        "min": 1
    },
    {
        "id": PLANT_TEXTURE,
        "type": "multi",
        "prompt": "What plant personalities excite you?",
        "helper": "Think about foliage textures and presence.",
        "options": [
            {"value": "architectural", "label": "Architectural statement plants"},
            {"value": "grasses", "label": "Movement from ornamental grasses"},
            {"value": "perennials", "label": "Perennial blooms that return"},
            {"value": "shrubs", "label": "Shrubs for structure & screening"},
            {"value": "edibles", "label": "Edible layers mixed into beds"}
        ],
        "min": 1
    },
    {
        "id": SEASONAL_FOCUS,
        "type": "multi",
        "prompt": "Which seasonal highlights matter most to you?",
        "options": [
            {"value": "spring", "label": "Spring blossoms"},
            {"value": "summer", "label": "Summer color & fragrance"},
            {"value": "autumn", "label": "Autumn foliage & seed heads"},
            {"value": "winter", "label": "Winter structure & evergreens"}
        ],
        "min": 1
    },
    {
        "id": FEATURE_WISH_LIST,
        "type": "multi",
        "prompt": "Pick the features that would delight you.",
        "options": [
            {"value": "water", "label": "Water feature or reflective pool"},
            {"value": "fire", "label": "Fire pit or outdoor hearth"},
            {"value": "seating", "label": "Built-in seating or lounge"},
            {"value": "pathways", "label": "Expressive pathways & stepping stones"},
            {"value": "edible_station", "label": "Dedicated edible garden zone"},
            {"value": "wildlife_nook", "label": "Wildlife corner / bug hotel"}
        ]
    },
    {
        "id": EDIBLE_AMBITION,
        "type": "single",
        "prompt": "How prominent should edible planting be?",
        "options": [
            {"value": "hero", "label": "Hero feature – front and center"},
            {"value": "integrated", "label": "Integrated with ornamentals"},
            {"value": "accent", "label": "Just a few potted or raised beds"},
            {"value": "none", "label": "Not a focus for this garden"}
        ],
        # Only asked once the user plans to grow food
        "depends_on": {"question_id": GARDEN_USAGE, "includes": "growing_food"}
    },
    {
        "id": NOTES,
        "type": "text",
        "prompt": "Anything else we should know?",
        "helper": "Optional details such as pets, children, or dream inspirations.",
        "placeholder": "e.g., We have a small dog, love moonlight evenings, and prefer drought-tolerant choices.",
        "required": False
    }
]

GARDEN_QUESTIONNAIRE = {
    "version": QUESTIONNAIRE_VERSION,
    "questions": GARDEN_QUESTIONS,
}

"""
Curated option lists offered by the shoot form.

The API does not restrict selections to these values; the catalogue only
tells a client what to render.
"""

LIGHTING_PRESETS = [
    "Soft Pearl Light",
    "Window Glow",
    "Studio Edge Light",
    "Golden Hour Fade",
    "High-Key Clarity",
    "Cinematic Contrast",
]

FILM_STOCKS = [
    "Kodak Portra 400",
    "Fujifilm Pro 400H",
    "Kodak Ektar 100",
    "Ilford Delta 100",
    "CineStill 800T",
]

ASPECT_RATIOS = [
    "1:1 (Square)",
    "4:5",
    "3:4 (Portrait)",
    "9:16 (Vertical)",
    "16:9 (Landscape)",
]

OPTIONS = {
    "editorialStyle": [
        "Helmut Newton (bold black & white glamour)",
        "Peter Lindbergh (natural daylight & emotion)",
        "Corinne Day (grunge realism)",
        "Steven Meisel (polished fantasy)",
        "Ellen von Unwerth (playful feminine energy)",
        "Juergen Teller (flash rawness)",
        "David Sims (experimental minimalism)",
        "Nick Knight (experimental color)",
        "Nan Goldin (intimate realism)",
        "Herb Ritts (sculptural light)",
        "Patrick Demarchelier (classic elegance)",
        "Mario Sorrenti (dreamlike sensual minimalism)",
        "Mario Testino (luxury candid)",
        "Annie Leibovitz (cinematic storytelling)",
        "Bruce Weber (youthful Americana energy)",
    ],
    # model setup
    "models": ["Female", "Male"],
    "ethnicities": [
        "Caucasian", "Black", "East Asian", "South Asian",
        "Latina", "Mixed", "Middle Eastern", "Indigenous",
    ],
    "ageGroups": [
        "18-22", "22-25", "25-30", "30-35", "35-40", "40-45",
        "45-50", "50-55", "55-60", "60-65", "65-70", "70-75",
    ],
    # appearance
    "makeupFace": [
        "Natural skin-like", "Matte velvet", "Dewy glow", "Soft glam",
        "Editorial highlight", "Bronzed contour", "Bare minimal",
        "90s powder matte", "Porcelain", "Fresh gloss",
    ],
    "makeupEyes": [
        "Bare", "Clean mascara", "Winged liner", "Smoky", "Glossy lid",
        "Color accent", "Thin 90s line", "Metallic", "Underliner",
        "Soft fade", "Dark rim",
    ],
    "makeupLips": [
        "Nude gloss", "Satin nude", "Soft pink", "Red matte", "Berry tint",
        "Bare balm", "Chocolate brown", "Glossy red", "Ombre fade", "Muted mauve",
    ],
    "hair": {
        "colors": [
            "Black", "Dark brown", "Medium brown", "Blonde", "Platinum",
            "Red/Auburn", "Silver/Grey", "Dyed green", "Dyed blue",
            "Dyed red", "Dyed pink", "Two-tone",
        ],
        "streaks": [
            "None", "Blonde streaks", "Red streaks", "Green streaks",
            "Blue streaks", "Pink streaks", "Purple streaks",
            "Copper streaks", "Platinum streaks",
        ],
    },
    "hairStyles": [
        "Straight", "Loose waves", "Defined curls", "Slicked back", "Low bun",
        "High bun", "Bob", "Wet look", "Pixie cut", "Messy bob",
        "Curtain bangs", "Half-up", "Tousled layers", "Long blowout",
        "Pinned sides",
    ],
    "hairFinish": [
        "Wet & glossy", "Dry and textured", "Frizzed natural edge",
        "Sleek ironed finish", "Voluminous blowout", "Sculptural gel shapes",
        "Wispy flyaways (editorial realism)",
    ],
    "hairMotion": ["Static", "Light move", "Wind-blown", "Motion blur", "High wind"],
    # wardrobe
    "wardrobeStyles": [
        "Minimalist 90s", "Avant-garde couture", "Sports luxe",
        "Grunge editorial", "Classic power suit", "Lingerie layering",
        "Streetwear fusion", "Soft romantic", "Sheer textures",
        "Structured tailoring", "Leather & denim", "Maximalist prints",
    ],
    "wardrobeTextures": [
        "Satin / silk sheen", "Crinkled nylon", "Leather & latex",
        "Sheer mesh layers", "Velvet richness", "Denim & distressed cotton",
        "Metallic lamé", "Organza transparency", "Lace overlay",
    ],
    # environment
    "backdropLocation": [
        "Studio seamless (white, gray, pink, black)",
        "Textured concrete wall",
        "Fabric backdrop (crinkled muslin, velvet, metallic foil)",
        "Vintage apartment interior",
        "Rooftop daylight",
        "Alley or fire escape",
        "Desert landscape",
        "City street flash",
        "Neon storefronts",
    ],
    # lighting and tone
    "lightingMood": [
        "Flash on camera (90s paparazzi)", "Single strobe with spill",
        "Soft daylight with haze", "Mixed fluorescent and daylight",
        "Tungsten warm tone", "Color gel split (cyan/magenta)",
        "Hard overhead spot (Vogue Italia style)", "Silhouette rim light",
        "Harsh spotlight contrast", "Fluorescent wash", "Cross-light twin source",
    ],
    "toneStyle": [
        "Hyper-saturated magazine color", "Film grain nostalgia",
        "Dreamlike blur / lens flare", "Backstage energy",
        "Cinematic still frame", "Afterparty glow", "Industrial romance",
        "Luxury isolation",
    ],
    # camera
    "cameras": [
        "Canon EOS R5", "Nikon Z7 II", "Sony A7R IV", "Fujifilm GFX 100",
        "Hasselblad X2D", "Pentax 645Z (emul)", "Contax 645 (90s)",
    ],
    "lenses": [
        "35mm f/1.4", "50mm f/1.2", "85mm f/1.2", "100mm macro",
        "70-200mm f/2.8", "135mm f/2", "24-70mm f/2.8",
    ],
    "fStops": ["f/1.2", "f/1.4", "f/2", "f/2.8", "f/4", "f/5.6", "f/8", "f/11"],
    "framings": [
        "Extreme close-up", "Close-up", "Medium", "Wide", "Super wide",
        "Editorial crop", "Half-body",
    ],
    "angles": [
        "Eye-level", "¾", "Low", "Top-down", "Side profile", "Dutch tilt",
        "Over-shoulder",
    ],
    "poses": [
        "Candid motion shot", "Model leaning forward",
        "Head tilt with tensioned neck", "Seated introspection",
        "Arm-in-frame gesture", "Over-the-shoulder look", "Reclined attitude",
        "Jump shot motion", "Mirror interaction",
    ],
    "skincareMode": [True, False],
    "lightingPreset": LIGHTING_PRESETS,
    "filmStock": FILM_STOCKS,
    "aspectRatio": ASPECT_RATIOS,
}

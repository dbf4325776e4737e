DEFAULT_ICON = '🎬'

# First keyword found in the lowercased name wins
ICON_KEYWORDS = [
    ('prison', '🔒'),
    ('family', '👨‍👩‍👦'),
    ('hero', '🦸'),
    ('urban', '🏙️'),
    ('journey', '🛤️'),
    ('dream', '💭'),
    ('virtual', '💻'),
    ('wise', '🧠'),
    ('ring', '💍'),
    ('space', '🚀'),
    ('club', '🥊'),
    ('silent', '🤫'),
]


def movie_icon(name):
    if not name:
        return DEFAULT_ICON

    lowered = name.lower()
    for keyword, icon in ICON_KEYWORDS:
        if keyword in lowered:
            return icon
    return DEFAULT_ICON

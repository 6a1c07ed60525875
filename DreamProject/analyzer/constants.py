
# Seuils de validation (en caractères, texte brut)
MIN_DREAM_LENGTH = 10
MIN_EMOTIONS_LENGTH = 5

# Messages de validation centralisés
DREAM_TOO_SHORT_MESSAGE = 'Please provide more details about your dream for a better analysis.'
EMOTIONS_TOO_SHORT_MESSAGE = 'Please describe your emotions in more detail for a more accurate analysis.'

# Message d'erreur générique du flux SSE
ANALYSIS_ERROR_MESSAGE = 'The threads of your dream got tangled... Please try the analysis again.'

DEFAULT_EMOTION = 'neutral'

# Dictionnaire de labels partagé
EMOTION_LABELS = {
    'neutral': 'Neutral',
    'happy': 'Happy',
    'sad': 'Sad',
    'fear': 'Fear',
    'anxiety': 'Anxiety',
}

# L'ordre de déclaration compte : il départage les égalités du classifieur
EMOTION_KEYWORDS = {
    'happy': [
        'happy', 'joy', 'excited', 'peaceful', 'calm', 'content', 'bliss',
        'ecstatic', 'delighted'
    ],
    'sad': [
        'sad', 'depressed', 'melancholy', 'grief', 'loss', 'sorrow',
        'despair', 'heartbroken'
    ],
    'fear': [
        'scared', 'terrified', 'horror', 'frightened', 'panic', 'dread',
        'terror', 'phobia'
    ],
    'anxiety': [
        'anxious', 'worried', 'nervous', 'uneasy', 'stressed', 'tense',
        'restless', 'apprehensive'
    ],
}

# ----- Interprétation ----- #

# Mots secondaires qui choisissent la variante des thèmes à deux branches
FLYING_FEAR_KEYWORD = 'scared'
WATER_CALM_KEYWORD = 'calm'

DREAM_THEMES = {
    'flying': {
        'positive': 'represents a desire for freedom and transcendence. You may be feeling empowered or seeking to overcome current limitations.',
        'negative': 'might indicate anxiety about control or a situation that feels out of reach.',
        'context': 'Consider areas in your life where you feel restricted or are seeking liberation.',
    },
    'falling': {
        'primary': 'suggests a loss of control or support in your life',
        'context': 'This could be related to a relationship, career, or personal goal.',
        'deeper': 'The sensation of falling often reflects deep-seated insecurities or fear of failure.',
    },
    'water': {
        'calm': 'symbolizes emotional clarity and peace. The stillness of the water reflects your inner tranquility.',
        'turbulent': 'represents emotional turmoil or overwhelming feelings. The churning waters mirror your inner struggles.',
        'depth': 'The depth of the water may represent the depths of your unconscious mind.',
    },
    'chase': {
        'primary': 'indicates you may be avoiding confronting something important in your waking life',
        'context': 'Consider what you might be running from.',
        'deeper': 'The pursuit in your dream could represent unresolved conflicts or responsibilities.',
    },
    'teeth': {
        'primary': 'often connects to anxiety about appearance or communication',
        'context': 'It may also symbolize powerlessness or difficulty expressing yourself.',
        'deeper': 'This dream frequently occurs during periods of significant life changes or stress.',
    },
    'house': {
        'primary': 'represents your current state of mind or sense of self',
        'context': 'Unfamiliar parts of it can point to unexplored aspects of your personality.',
        'deeper': 'Different rooms may represent different aspects of your life or personality.',
    },
    'darkness': {
        'primary': 'represents fear of the unknown or uncertainty in your life',
        'context': 'It suggests a need to explore hidden aspects of yourself.',
        'deeper': 'The darkness may be calling you to trust your intuition.',
    },
    'light': {
        'primary': 'symbolizes clarity, understanding, or spiritual awakening',
        'context': 'It represents hope, direction, or divine intervention.',
        'deeper': 'It suggests personal growth and enlightenment.',
    },
}

# Utilisés seulement quand aucun thème n'a été trouvé
FALLBACK_EMOTION_WORDS = ['fear', 'joy', 'anxiety', 'peace', 'confusion', 'anger', 'love']

INTERPRETATION_EMOTIONAL_CONTEXT = (
    'Your dream reflects a complex emotional state involving {emotions}. '
    'The interplay of these emotions suggests you may be processing significant life experiences or changes. '
)
INTERPRETATION_DEFAULT = (
    'Your dream appears to be processing recent experiences and emotions. '
    'The specific symbols and events suggest a period of personal growth and introspection. '
)
INTERPRETATION_CONCLUSION = (
    '\nThis dream is uniquely personal to your current life situation and may be '
    'highlighting areas that need your attention or acknowledgment.'
)

# ----- Signification émotionnelle ----- #

EMOTIONAL_PATTERNS = {
    'joy': {
        'keywords': ['happy', 'excited', 'peaceful', 'content', 'elated', 'blissful'],
        'analysis': 'Your emotional state shows positive energy and fulfillment. This suggests a period of personal growth and satisfaction in your life.',
        'deeper': 'This positive emotional state may be revealing your capacity for happiness and personal achievement.',
    },
    'fear': {
        'keywords': ['scared', 'terrified', 'frightened', 'horror', 'dread'],
        'analysis': 'Your emotional response indicates underlying anxieties or fears that may need addressing. This could be related to recent changes or upcoming challenges.',
        'deeper': 'These fear-based emotions might be highlighting areas where you feel vulnerable or unprepared.',
    },
    'sadness': {
        'keywords': ['sad', 'depressed', 'melancholy', 'grief', 'heartbroken'],
        'analysis': 'The presence of sadness in your dream suggests unprocessed emotions or a need for emotional healing.',
        'deeper': 'This emotional state may be calling for acknowledgment and gentle self-care.',
    },
    'anxiety': {
        'keywords': ['anxious', 'worried', 'nervous', 'stressed', 'uneasy'],
        'analysis': 'Your emotional state reflects inner tension and concern. This might be connected to current life pressures or uncertainty about the future.',
        'deeper': 'The anxiety present in your dream could be highlighting areas where you need more support or clarity.',
    },
    'confusion': {
        'keywords': ['confused', 'uncertain', 'lost', 'unclear', 'bewildered'],
        'analysis': 'The emotional confusion in your dream suggests a period of transition or decision-making in your life.',
        'deeper': 'This state of uncertainty may be inviting you to trust your intuition more deeply.',
    },
    'anger': {
        'keywords': ['angry', 'furious', 'rage', 'frustrated', 'irritated'],
        'analysis': 'The presence of anger suggests unresolved conflicts or suppressed emotions that need attention.',
        'deeper': 'This emotional energy might be signaling a need to assert boundaries or address injustices.',
    },
}

EMOTIONAL_COMBINATION = (
    "The combination of {patterns} suggests a complex emotional landscape. "
    "This mix of emotions indicates that you're processing multiple aspects of "
    "your life experience simultaneously.\n\n"
)
EMOTIONAL_DEFAULT = (
    'Your emotional response to the dream reveals deep-seated feelings that are seeking expression. '
    'Consider journaling about these emotions to gain further insight.\n\n'
)
EMOTIONAL_CONCLUSION = (
    'Remember that emotions in dreams often serve as messengers from our subconscious, '
    'helping us understand our deeper needs and concerns.'
)

# ----- Conseils ----- #

ADVICE_HEADER = (
    'Based on your unique dream experience and emotional response, '
    'here are personalized recommendations:\n\n'
)

# (texte analysé, mots déclencheurs, bloc) - évalués dans cet ordre, non exclusifs
ADVICE_RULES = [
    ('dream', ['falling'], 'falling'),
    ('dream', ['chase', 'running'], 'chase'),
    ('dream', ['water'], 'water'),
    ('dream', ['flying'], 'flying'),
    ('emotions', ['anxiety', 'stress'], 'anxiety'),
    ('emotions', ['sad', 'grief'], 'sadness'),
    ('dream', ['teeth', 'appearance'], 'teeth'),
    ('dream', ['house', 'home'], 'house'),
]

ADVICE_BLOCKS = {
    'falling': (
        '1. Practice grounding exercises to enhance your sense of stability and control:\n'
        '   - Try the 5-4-3-2-1 sensory awareness technique\n'
        '   - Engage in regular physical exercise to strengthen your sense of balance\n'
        '2. Explore areas in your life where you feel unsupported and consider building stronger support systems.\n'
    ),
    'chase': (
        '1. Identify what you might be avoiding in your waking life:\n'
        '   - Make a list of current challenges or responsibilities\n'
        '   - Create a step-by-step plan to address each one\n'
        '2. Practice confronting difficult situations through gradual exposure and confidence-building exercises.\n'
    ),
    'water_calm': (
        '1. Maintain your emotional balance through:\n'
        '   - Regular meditation practice\n'
        '   - Mindful breathing exercises\n'
        '2. Document your successful emotional regulation strategies.\n'
    ),
    'water': (
        '1. Develop emotional regulation techniques:\n'
        '   - Practice deep breathing exercises\n'
        '   - Try progressive muscle relaxation\n'
        '2. Consider working with a counselor to navigate emotional turbulence.\n'
    ),
    'flying': (
        '1. Channel your aspirations into actionable goals:\n'
        '   - Create a vision board\n'
        '   - Set SMART objectives for your dreams\n'
        '2. Explore activities that promote personal freedom and growth.\n'
    ),
    'anxiety': (
        '1. Establish a calming bedtime routine:\n'
        '   - Practice gentle yoga or stretching\n'
        '   - Try aromatherapy with lavender or chamomile\n'
        '2. Maintain an anxiety journal to track triggers and patterns.\n'
        '3. Consider mindfulness meditation or guided relaxation techniques.\n'
    ),
    'sadness': (
        '1. Create space for emotional processing:\n'
        '   - Set aside quiet time for reflection\n'
        '   - Practice self-compassion exercises\n'
        '2. Explore grief counseling or support groups.\n'
        '3. Engage in expressive arts or journaling.\n'
    ),
    'teeth': (
        '1. Enhance self-expression through:\n'
        '   - Public speaking practice\n'
        '   - Writing exercises\n'
        '2. Work with a therapist on communication skills.\n'
        '3. Practice positive self-image affirmations.\n'
    ),
    'house': (
        '1. Evaluate your personal boundaries and living space:\n'
        '   - Declutter and organize your environment\n'
        '   - Create a dedicated space for relaxation\n'
        '2. Reflect on your sense of security and belonging.\n'
        '3. Consider feng shui principles for harmony in your living space.\n'
    ),
    'default': (
        '1. Maintain a detailed dream journal:\n'
        '   - Record dreams immediately upon waking\n'
        '   - Note recurring themes and symbols\n'
        '2. Practice mindfulness meditation daily.\n'
        '3. Schedule regular self-reflection time.\n'
    ),
}

ADVICE_GROWTH_SUGGESTIONS = (
    '\nPersonal Growth Suggestions:\n'
    '• Consider working with a dream therapist or counselor\n'
    '• Join a dream interpretation group or workshop\n'
    '• Read books on dream psychology and symbolism\n'
)
ADVICE_CONCLUSION = (
    '\nRemember: Your dreams are unique messages from your subconscious. '
    'Regular reflection and professional guidance can help you better understand '
    'their significance in your life journey.'
)

# ----- Fonds décoratifs ----- #

EMOTION_BACKGROUNDS = {
    'neutral': 'linear-gradient(to bottom, #312e81, #581c87, #831843)',
    'happy': 'linear-gradient(to bottom, #facc15, #f97316, #ef4444)',
    'sad': 'linear-gradient(to bottom, #1e3a8a, #1d4ed8, #3b82f6)',
    'fear': 'linear-gradient(to bottom, #111827, #581c87, #7f1d1d)',
    'anxiety': 'linear-gradient(to bottom, #7f1d1d, #9a3412, #a16207)',
}

EMOTION_IMAGES = {
    'neutral': [
        'https://images.unsplash.com/photo-1490730141103-6cac27aaab94',
        'https://images.unsplash.com/photo-1470252649378-9c29740c9fa8',
        'https://images.unsplash.com/photo-1682686580003-22d3d65399a8',
        'https://images.unsplash.com/photo-1507608616759-54f48f0af0ee',
        'https://images.unsplash.com/photo-1513836279014-a89f7a76ae86',
    ],
    'happy': [
        'https://images.unsplash.com/photo-1518531933037-91b2f5f229cc',
        'https://images.unsplash.com/photo-1474898856510-884a2c0be546',
        'https://images.unsplash.com/photo-1519834785169-98be25ec3f84',
        'https://images.unsplash.com/photo-1513279922550-250c2129b13a',
        'https://images.unsplash.com/photo-1490730141103-6cac27aaab94',
    ],
    'sad': [
        'https://images.unsplash.com/photo-1499209974431-9dddcece7f88',
        'https://images.unsplash.com/photo-1516585427167-9f4af9627e6c',
        'https://images.unsplash.com/photo-1541199249251-f713e6145474',
        'https://images.unsplash.com/photo-1494368308039-ed3393a402a4',
        'https://images.unsplash.com/photo-1418065460487-3e41a6c84dc5',
    ],
    'fear': [
        'https://images.unsplash.com/photo-1509248961158-e54f6934749c',
        'https://images.unsplash.com/photo-1504253163759-c23fccaebb55',
        'https://images.unsplash.com/photo-1520451644838-906a72aa7c86',
        'https://images.unsplash.com/photo-1502581827181-9cf3c3ee0106',
        'https://images.unsplash.com/photo-1508166785545-c2dd4c113c66',
    ],
    'anxiety': [
        'https://images.unsplash.com/photo-1476611317561-60117649dd94',
        'https://images.unsplash.com/photo-1594322436404-5a0526db4d13',
        'https://images.unsplash.com/photo-1452421822248-d4c2b47f0c81',
        'https://images.unsplash.com/photo-1542281286-9e0a16bb7366',
        'https://images.unsplash.com/photo-1469474968028-56623f02e42e',
    ],
}

# Voile sombre posé au-dessus de l'image pour garder le texte lisible
BACKGROUND_OVERLAY = 'linear-gradient(to bottom, rgba(0, 0, 0, 0.7), rgba(0, 0, 0, 0.7))'

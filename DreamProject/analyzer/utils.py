import time
import random
import logging
from typing import Any, Tuple
from django.conf import settings
from .models import DreamAnalysis
from .constants import (
    MIN_DREAM_LENGTH,
    MIN_EMOTIONS_LENGTH,
    DREAM_TOO_SHORT_MESSAGE,
    EMOTIONS_TOO_SHORT_MESSAGE,
    DEFAULT_EMOTION,
    EMOTION_LABELS,
    EMOTION_KEYWORDS,
    FLYING_FEAR_KEYWORD,
    WATER_CALM_KEYWORD,
    DREAM_THEMES,
    FALLBACK_EMOTION_WORDS,
    INTERPRETATION_EMOTIONAL_CONTEXT,
    INTERPRETATION_DEFAULT,
    INTERPRETATION_CONCLUSION,
    EMOTIONAL_PATTERNS,
    EMOTIONAL_COMBINATION,
    EMOTIONAL_DEFAULT,
    EMOTIONAL_CONCLUSION,
    ADVICE_HEADER,
    ADVICE_RULES,
    ADVICE_BLOCKS,
    ADVICE_GROWTH_SUGGESTIONS,
    ADVICE_CONCLUSION,
    EMOTION_BACKGROUNDS,
    EMOTION_IMAGES,
    BACKGROUND_OVERLAY,
)

logger = logging.getLogger(__name__)


# ---------- VALIDATION ----------


def validate_input(dream: str, emotions: str) -> Tuple[bool, str]:
    """
    Vérifie la longueur des deux saisies.

    Le contrôle du rêve est prioritaire : si les deux échouent, seul le
    message du rêve est renvoyé. Les longueurs sont comptées en caractères
    sur le texte brut, aucun autre contenu n'est rejeté.
    """
    if len(dream) < MIN_DREAM_LENGTH:
        return False, DREAM_TOO_SHORT_MESSAGE
    if len(emotions) < MIN_EMOTIONS_LENGTH:
        return False, EMOTIONS_TOO_SHORT_MESSAGE
    return True, ""


# ---------- ÉMOTION DOMINANTE ----------


def count_emotion_keywords(emotions: str) -> dict:
    """Compte les mots-clés trouvés par catégorie (un point par mot-clé présent)"""
    lowercase_emotions = emotions.lower()
    emotion_counts = {emotion: 0 for emotion in EMOTION_KEYWORDS}

    for emotion, keywords in EMOTION_KEYWORDS.items():
        for keyword in keywords:
            if keyword in lowercase_emotions:
                emotion_counts[emotion] += 1

    return emotion_counts


def detect_dominant_emotion(emotions: str) -> str:
    """
    Renvoie l'émotion dominante parmi happy, sad, fear, anxiety ou 'neutral'.

    Réduction par paires dans l'ordre de déclaration : l'élément de gauche
    n'est conservé que s'il est strictement supérieur, une égalité revient
    donc à la catégorie déclarée en dernier. Sans aucun mot-clé, la
    réduction désignerait 'anxiety' ; le repli force alors 'neutral'.
    """
    emotion_counts = count_emotion_keywords(emotions)

    items = list(emotion_counts.items())
    dominant = items[0]
    for candidate in items[1:]:
        dominant = dominant if dominant[1] > candidate[1] else candidate

    if dominant[1] == 0:
        return DEFAULT_EMOTION

    logger.debug(f"Émotion dominante: {dominant[0]} - comptes {emotion_counts}")
    return dominant[0]


# ---------- INTERPRÉTATION ----------


def _theme_paragraph(theme, meanings, dream_lower):
    """Construit le paragraphe d'un thème détecté"""
    if theme == 'flying':
        variant = meanings['negative'] if FLYING_FEAR_KEYWORD in dream_lower else meanings['positive']
        return f"Your experience of {theme} {variant} {meanings['context']} "
    if theme == 'water':
        variant = meanings['calm'] if WATER_CALM_KEYWORD in dream_lower else meanings['turbulent']
        return f"The presence of water in your dream {variant} {meanings['depth']} "
    return f"The {theme} in your dream {meanings['primary']}. {meanings['context']} {meanings['deeper']} "


def generate_interpretation(dream: str) -> str:
    """Interprète le rêve à partir des thèmes trouvés dans le texte"""
    dream_lower = dream.lower()
    interpretation = ''
    used_themes = set()

    for theme, meanings in DREAM_THEMES.items():
        if theme in dream_lower and theme not in used_themes:
            used_themes.add(theme)
            interpretation += _theme_paragraph(theme, meanings, dream_lower)

    if used_themes:
        logger.debug(f"Thèmes détectés: {sorted(used_themes)}")
    else:
        # Contexte émotionnel si aucun thème précis
        emotional_context = [word for word in FALLBACK_EMOTION_WORDS if word in dream_lower]
        if emotional_context:
            interpretation = INTERPRETATION_EMOTIONAL_CONTEXT.format(
                emotions=' and '.join(emotional_context)
            )
        else:
            interpretation = INTERPRETATION_DEFAULT

    interpretation += INTERPRETATION_CONCLUSION
    return interpretation


# ---------- SIGNIFICATION ÉMOTIONNELLE ----------


def analyze_emotions(emotions: str) -> str:
    """Décrit la portée des émotions ressenties, motif par motif"""
    emotions_lower = emotions.lower()
    analysis = ''
    emotional_themes = []

    for pattern, data in EMOTIONAL_PATTERNS.items():
        if any(keyword in emotions_lower for keyword in data['keywords']):
            emotional_themes.append(pattern)
            analysis += f"{data['analysis']} {data['deeper']}\n\n"

    if len(emotional_themes) > 1:
        analysis += EMOTIONAL_COMBINATION.format(patterns=', '.join(emotional_themes))

    if not emotional_themes:
        analysis = EMOTIONAL_DEFAULT
    else:
        logger.debug(f"Motifs émotionnels: {emotional_themes}")

    analysis += EMOTIONAL_CONCLUSION
    return analysis


# ---------- CONSEILS ----------


def generate_advice(dream: str, emotions: str) -> str:
    """Assemble les recommandations selon le contenu du rêve et des émotions"""
    sources = {
        'dream': dream.lower(),
        'emotions': emotions.lower(),
    }
    advice = ADVICE_HEADER
    matched = False

    for source, keywords, block in ADVICE_RULES:
        text = sources[source]
        if not any(keyword in text for keyword in keywords):
            continue
        if block == 'water' and WATER_CALM_KEYWORD in text:
            block = 'water_calm'
        advice += ADVICE_BLOCKS[block]
        matched = True

    if not matched:
        advice += ADVICE_BLOCKS['default']

    advice += ADVICE_GROWTH_SUGGESTIONS
    advice += ADVICE_CONCLUSION
    return advice


# ---------- ANALYSE COMPLÈTE ----------


def analyze_dream(dream: str, emotions: str) -> DreamAnalysis:
    """Produit l'analyse complète (sans délai artificiel)"""
    logger.info(f"Analyse démarrée - rêve {len(dream)} caractères, émotions {len(emotions)} caractères")
    start_time = time.time()

    analysis = DreamAnalysis(
        interpretation=generate_interpretation(dream),
        emotional_significance=analyze_emotions(emotions),
        advice=generate_advice(dream, emotions),
    )

    duration = time.time() - start_time
    logger.info(f"Analyse terminée en {duration:.4f}s")
    return analysis


def simulate_thinking_delay():
    """
    Pause artificielle avant l'affichage du résultat.

    Durée tirée uniformément entre THINKING_DELAY_MIN et THINKING_DELAY_MAX
    (secondes, configuration ANALYZER_CONFIG). Renvoie la durée appliquée.
    """
    config = settings.ANALYZER_CONFIG
    delay = random.uniform(config['THINKING_DELAY_MIN'], config['THINKING_DELAY_MAX'])
    logger.debug(f"Réflexion simulée: {delay:.2f}s")
    time.sleep(delay)
    return delay


# ---------- FONDS DÉCORATIFS ----------


def get_background(emotion: Any, index: int = 0) -> dict:
    """Renvoie le thème visuel (dégradé + image) d'une émotion"""
    key = _emotion_key(emotion)
    if key not in EMOTION_IMAGES:
        key = DEFAULT_EMOTION

    images = EMOTION_IMAGES[key]
    position = index % len(images)
    image_url = images[position]

    return {
        'emotion': key,
        'label': format_emotion_label(key),
        'gradient': EMOTION_BACKGROUNDS[key],
        'image_url': image_url,
        'background_image': f"{BACKGROUND_OVERLAY}, url({image_url})",
        'index': position,
        'next_index': next_image_index(key, position),
    }


def next_image_index(emotion: Any, index: int) -> int:
    """Index suivant dans la rotation des images (cyclique)"""
    key = _emotion_key(emotion)
    images = EMOTION_IMAGES.get(key, EMOTION_IMAGES[DEFAULT_EMOTION])
    return (index + 1) % len(images)


# ---------- LABELS ----------


def _emotion_key(emotion: Any) -> str:
    """Clé des tables d'émotions : None -> '', trim + minuscule"""
    return str(emotion or '').strip().lower()


def format_emotion_label(emotion: Any) -> str:
    """Ex: 'happy', 'HAPPY', ' happy ' -> 'Happy' ; clé inconnue -> capitalize()"""
    key = _emotion_key(emotion)
    if not key:
        return ""
    return EMOTION_LABELS.get(key, key.capitalize())

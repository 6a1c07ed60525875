"""
Tests des fonctions utilitaires.

Ce module teste toutes les heuristiques de l'application :
- Validation des saisies
- Classification de l'émotion dominante (y compris les égalités)
- Génération de l'interprétation, de la signification émotionnelle et des conseils
- Délai de réflexion simulé
- Fonds décoratifs et normalisation des labels
"""

import logging
from django.test import SimpleTestCase
from django.test.utils import override_settings
from unittest.mock import patch

from ..constants import (
    DREAM_TOO_SHORT_MESSAGE,
    EMOTIONS_TOO_SHORT_MESSAGE,
    DREAM_THEMES,
    INTERPRETATION_DEFAULT,
    INTERPRETATION_CONCLUSION,
    EMOTIONAL_DEFAULT,
    EMOTIONAL_CONCLUSION,
    ADVICE_HEADER,
    ADVICE_BLOCKS,
    ADVICE_GROWTH_SUGGESTIONS,
    ADVICE_CONCLUSION,
    EMOTION_IMAGES,
    EMOTION_BACKGROUNDS,
)
from ..models import DreamAnalysis
from ..utils import (
    validate_input,
    count_emotion_keywords,
    detect_dominant_emotion,
    generate_interpretation,
    analyze_emotions,
    generate_advice,
    analyze_dream,
    simulate_thinking_delay,
    get_background,
    next_image_index,
    format_emotion_label,
)

logger = logging.getLogger(__name__)

TEST_ANALYZER_CONFIG = {
    'THINKING_DELAY_MIN': 1.5,
    'THINKING_DELAY_MAX': 2.5,
    'BACKGROUND_ROTATION_SECONDS': 5,
}


class ValidationTest(SimpleTestCase):
    """
    Tests de validate_input.

    Cette classe teste :
    - Les seuils exacts (10 et 5 caractères)
    - La priorité du message du rêve
    - L'absence de tout autre filtrage
    """

    def test_thresholds_are_exact(self):
        self.assertFalse(validate_input("a" * 9, "b" * 5)[0])
        self.assertTrue(validate_input("a" * 10, "b" * 5)[0])
        self.assertFalse(validate_input("a" * 10, "b" * 4)[0])

    def test_length_counts_raw_characters(self):
        """
        Les espaces comptent : aucune normalisation avant la mesure.
        """
        self.assertEqual(validate_input(" " * 10, " " * 5), (True, ""))
        self.assertEqual(validate_input("  short  ", "happy")[1], DREAM_TOO_SHORT_MESSAGE)

    def test_arbitrary_content_passes(self):
        self.assertTrue(validate_input("夢の中で空を飛んでいた", "こわかった。")[0])
        self.assertTrue(validate_input("\u200b" * 10, "\u200d" * 5)[0])

    def test_length_counts_code_points(self):
        """
        Un caractère hors BMP compte pour un : trois emoji restent sous le seuil de 5.
        """
        self.assertEqual(
            validate_input("A long enough dream", "\U0001F600" * 3),
            (False, EMOTIONS_TOO_SHORT_MESSAGE),
        )
        self.assertTrue(validate_input("A long enough dream", "\U0001F600" * 5)[0])

    def test_messages(self):
        self.assertEqual(validate_input("", ""), (False, DREAM_TOO_SHORT_MESSAGE))
        self.assertEqual(
            validate_input("A long enough dream", ""),
            (False, EMOTIONS_TOO_SHORT_MESSAGE),
        )


class DominantEmotionTest(SimpleTestCase):
    """
    Tests du classifieur d'émotion dominante.

    Les égalités sont tranchées par l'ordre de déclaration de la table : la
    catégorie déclarée en dernier l'emporte. Ce comportement est conservé tel
    quel et vérifié ici explicitement.
    """

    def test_count_keywords(self):
        counts = count_emotion_keywords("I feel so happy and joyful today")
        self.assertEqual(counts, {'happy': 2, 'sad': 0, 'fear': 0, 'anxiety': 0})

    def test_count_is_per_keyword_not_per_occurrence(self):
        counts = count_emotion_keywords("sad sad sad")
        self.assertEqual(counts['sad'], 1)

    def test_case_insensitive(self):
        self.assertEqual(detect_dominant_emotion("HAPPY"), "happy")
        self.assertEqual(detect_dominant_emotion("Completely TERRIFIED"), "fear")

    def test_majority_wins(self):
        self.assertEqual(detect_dominant_emotion("terrified, frightened and a bit nervous"), "fear")
        self.assertEqual(detect_dominant_emotion("a deep sense of loss and sorrow, but happy"), "sad")

    def test_tie_goes_to_later_declared_category(self):
        """
        Égalités : happy < sad < fear < anxiety dans l'ordre de déclaration.
        """
        self.assertEqual(detect_dominant_emotion("happy and sad"), "sad")
        self.assertEqual(detect_dominant_emotion("scared and worried"), "anxiety")
        self.assertEqual(detect_dominant_emotion("happy and scared"), "fear")

    def test_all_zero_is_coerced_to_neutral(self):
        """
        Sans mot-clé, la réduction désignerait la dernière catégorie ('anxiety') ;
        le repli doit quand même renvoyer 'neutral'.
        """
        self.assertEqual(count_emotion_keywords("blank"), {'happy': 0, 'sad': 0, 'fear': 0, 'anxiety': 0})
        self.assertEqual(detect_dominant_emotion("blank"), "neutral")
        self.assertEqual(detect_dominant_emotion(""), "neutral")

    def test_substring_matching(self):
        # 'calm' appartient à la catégorie happy, même dans 'calmly'
        self.assertEqual(detect_dominant_emotion("I waited calmly"), "happy")


class InterpretationTest(SimpleTestCase):
    """
    Tests de generate_interpretation.
    """

    def test_flying_positive_variant(self):
        interpretation = generate_interpretation("I was flying above the clouds")
        self.assertTrue(interpretation.startswith("Your experience of flying represents a desire for freedom"))
        self.assertIn(DREAM_THEMES['flying']['context'], interpretation)

    def test_every_theme_contributes_a_paragraph(self):
        for theme in DREAM_THEMES:
            interpretation = generate_interpretation(f"There was {theme} in it")
            self.assertNotIn(INTERPRETATION_DEFAULT, interpretation, theme)
            self.assertNotIn("complex emotional state", interpretation, theme)

    def test_primary_theme_paragraph(self):
        interpretation = generate_interpretation("I was falling down a well")
        self.assertIn(
            "The falling in your dream suggests a loss of control or support in your life. "
            "This could be related to a relationship, career, or personal goal. "
            "The sensation of falling often reflects deep-seated insecurities or fear of failure. ",
            interpretation,
        )

    def test_theme_contributes_once(self):
        interpretation = generate_interpretation("falling, falling, and falling again")
        self.assertEqual(interpretation.count("The falling in your dream"), 1)

    def test_themes_follow_table_order(self):
        interpretation = generate_interpretation("A light in the window of a house")
        self.assertLess(
            interpretation.index("The house in your dream"),
            interpretation.index("The light in your dream"),
        )

    def test_fallback_lists_emotion_words(self):
        interpretation = generate_interpretation("Love and fear were everywhere")
        self.assertTrue(interpretation.startswith(
            "Your dream reflects a complex emotional state involving fear and love. "
        ))

    def test_fallback_default_paragraph(self):
        interpretation = generate_interpretation("I was walking in a garden")
        self.assertEqual(interpretation, INTERPRETATION_DEFAULT + INTERPRETATION_CONCLUSION)

    def test_conclusion_always_appended(self):
        for dream in ["water", "Love hurts", "nothing at all", ""]:
            self.assertTrue(generate_interpretation(dream).endswith(INTERPRETATION_CONCLUSION))


class EmotionalSignificanceTest(SimpleTestCase):
    """
    Tests de analyze_emotions.
    """

    def test_single_pattern(self):
        analysis = analyze_emotions("I was happy")
        self.assertTrue(analysis.startswith("Your emotional state shows positive energy and fulfillment."))
        self.assertNotIn("The combination of", analysis)

    def test_multiple_patterns_are_combined(self):
        analysis = analyze_emotions("happy but scared and a little angry")
        self.assertIn("The combination of joy, fear, anger suggests a complex emotional landscape.", analysis)

    def test_default_paragraph(self):
        analysis = analyze_emotions("nothing special")
        self.assertEqual(analysis, EMOTIONAL_DEFAULT + EMOTIONAL_CONCLUSION)

    def test_conclusion_always_appended(self):
        for emotions in ["sad", "confused and furious", ""]:
            self.assertTrue(analyze_emotions(emotions).endswith(EMOTIONAL_CONCLUSION))


class AdviceTest(SimpleTestCase):
    """
    Tests de generate_advice.

    Objectif : vérifier que chaque bloc dépend du bon texte (rêve ou émotions)
    et que les blocs finaux sont toujours présents.
    """

    def test_header_and_closing_blocks(self):
        advice = generate_advice("I was falling", "scared")
        self.assertTrue(advice.startswith(ADVICE_HEADER))
        self.assertTrue(advice.endswith(ADVICE_GROWTH_SUGGESTIONS + ADVICE_CONCLUSION))

    def test_default_block_when_nothing_matches(self):
        advice = generate_advice("I walked in a garden", "okay")
        self.assertEqual(
            advice,
            ADVICE_HEADER + ADVICE_BLOCKS['default'] + ADVICE_GROWTH_SUGGESTIONS + ADVICE_CONCLUSION,
        )

    def test_water_variants(self):
        calm = generate_advice("Swimming in calm water", "fine")
        rough = generate_advice("Swimming in rough water", "fine")

        self.assertIn(ADVICE_BLOCKS['water_calm'], calm)
        self.assertNotIn(ADVICE_BLOCKS['water'], calm)
        self.assertIn(ADVICE_BLOCKS['water'], rough)
        self.assertNotIn(ADVICE_BLOCKS['water_calm'], rough)

    def test_emotion_blocks_use_emotion_text(self):
        self.assertIn(ADVICE_BLOCKS['anxiety'], generate_advice("An empty room", "so much stress"))
        self.assertIn(ADVICE_BLOCKS['sadness'], generate_advice("An empty room", "grief"))
        # Le mot 'stress' dans le rêve ne déclenche pas le bloc anxiété
        self.assertNotIn(ADVICE_BLOCKS['anxiety'], generate_advice("A stressful exam", "fine"))

    def test_blocks_are_not_exclusive_and_ordered(self):
        advice = generate_advice("Falling and then being chased to my home", "sad")
        positions = [
            advice.index(ADVICE_BLOCKS['falling']),
            advice.index(ADVICE_BLOCKS['chase']),
            advice.index(ADVICE_BLOCKS['sadness']),
            advice.index(ADVICE_BLOCKS['house']),
        ]
        self.assertEqual(positions, sorted(positions))
        self.assertNotIn(ADVICE_BLOCKS['default'], advice)

    def test_alternative_keywords(self):
        self.assertIn(ADVICE_BLOCKS['chase'], generate_advice("I was running", "fine"))
        self.assertIn(ADVICE_BLOCKS['teeth'], generate_advice("My appearance changed", "fine"))


class AnalyzeDreamTest(SimpleTestCase):
    def test_builds_analysis(self):
        analysis = analyze_dream("I was flying over the sea", "I felt happy")

        self.assertIsInstance(analysis, DreamAnalysis)
        self.assertEqual(analysis.interpretation, generate_interpretation("I was flying over the sea"))
        self.assertEqual(analysis.emotional_significance, analyze_emotions("I felt happy"))
        self.assertEqual(analysis.advice, generate_advice("I was flying over the sea", "I felt happy"))

    def test_logs_start_and_end(self):
        with self.assertLogs('analyzer.utils', level='INFO') as logs:
            analyze_dream("I was flying over the sea", "I felt happy")
        self.assertEqual(len(logs.records), 2)


@override_settings(ANALYZER_CONFIG=TEST_ANALYZER_CONFIG)
class ThinkingDelayTest(SimpleTestCase):
    @patch('analyzer.utils.time.sleep')
    def test_delay_within_bounds(self, mock_sleep):
        for _ in range(20):
            delay = simulate_thinking_delay()
            self.assertGreaterEqual(delay, 1.5)
            self.assertLessEqual(delay, 2.5)
        self.assertEqual(mock_sleep.call_count, 20)

    @patch('analyzer.utils.time.sleep')
    @patch('analyzer.utils.random.uniform', return_value=2.0)
    def test_uses_configured_bounds(self, mock_uniform, mock_sleep):
        self.assertEqual(simulate_thinking_delay(), 2.0)
        mock_uniform.assert_called_once_with(1.5, 2.5)
        mock_sleep.assert_called_once_with(2.0)


class BackgroundTest(SimpleTestCase):
    """
    Tests des fonds décoratifs.
    """

    def test_background_for_emotion(self):
        background = get_background('happy', 0)

        self.assertEqual(background['emotion'], 'happy')
        self.assertEqual(background['label'], 'Happy')
        self.assertEqual(background['gradient'], EMOTION_BACKGROUNDS['happy'])
        self.assertEqual(background['image_url'], EMOTION_IMAGES['happy'][0])
        self.assertTrue(background['background_image'].endswith(f"url({EMOTION_IMAGES['happy'][0]})"))
        self.assertEqual(background['next_index'], 1)

    def test_index_wraps(self):
        self.assertEqual(get_background('sad', 7)['index'], 2)
        self.assertEqual(get_background('fear', -1)['index'], 4)
        self.assertEqual(get_background('anxiety', 4)['next_index'], 0)

    def test_unknown_emotion_falls_back_to_neutral(self):
        self.assertEqual(get_background('joy')['emotion'], 'neutral')
        self.assertEqual(get_background(None)['emotion'], 'neutral')
        self.assertEqual(get_background(' HAPPY ')['emotion'], 'happy')

    def test_five_images_per_emotion(self):
        for emotion, images in EMOTION_IMAGES.items():
            self.assertEqual(len(images), 5, emotion)
            self.assertIn(emotion, EMOTION_BACKGROUNDS)

    def test_next_image_index_cycles(self):
        index = 0
        seen = []
        for _ in range(6):
            seen.append(index)
            index = next_image_index('neutral', index)
        self.assertEqual(seen, [0, 1, 2, 3, 4, 0])


class LabelFormattingTest(SimpleTestCase):
    def test_format_emotion_label(self):
        self.assertEqual(format_emotion_label('happy'), 'Happy')
        self.assertEqual(format_emotion_label(' ANXIETY '), 'Anxiety')
        self.assertEqual(format_emotion_label('wonder'), 'Wonder')
        self.assertEqual(format_emotion_label(None), '')

import logging
from .constants import DEFAULT_EMOTION
from .utils import (
    detect_dominant_emotion,
    get_background,
    next_image_index,
    format_emotion_label,
)

logger = logging.getLogger(__name__)


class AnalyzerState:
    """
    État en mémoire du formulaire d'analyse, recréé à chaque requête.

    Cycle : idle -> validating -> (rejected | analyzing) -> displaying.
    submit() peut être rappelé depuis n'importe quel état. as_context()
    sert d'étape de rendu.
    """

    IDLE = 'idle'
    VALIDATING = 'validating'
    REJECTED = 'rejected'
    ANALYZING = 'analyzing'
    DISPLAYING = 'displaying'

    def __init__(self, dream='', emotions='', current_emotion=DEFAULT_EMOTION, current_image_index=0):
        self.dream = dream
        self.emotions = emotions
        self.analysis = None
        self.is_analyzing = False
        self.current_emotion = current_emotion
        self.current_image_index = current_image_index
        self.input_error = ''
        self.status = self.IDLE

    # ----- Événements ----- #

    def submit(self, form):
        """
        Nouvelle soumission d'un DreamForm lié : renvoie True si l'analyse
        peut démarrer. Le message de rejet est celui levé par DreamForm.clean().
        """
        self.dream, self.emotions = form.get_texts()
        self.status = self.VALIDATING

        if not form.is_valid():
            message = form.get_error()
            logger.warning(f"Saisie rejetée: {message}")
            self.input_error = message
            self.is_analyzing = False
            self.status = self.REJECTED
            return False

        self.input_error = ''
        self.is_analyzing = True
        self.status = self.ANALYZING
        return True

    def complete(self, analysis):
        """Affiche le résultat et recalcule le thème visuel"""
        self.analysis = analysis
        self.is_analyzing = False
        self.set_emotion(detect_dominant_emotion(self.emotions))
        self.status = self.DISPLAYING

    def set_emotion(self, emotion):
        if emotion != self.current_emotion:
            logger.debug(f"Thème visuel: {self.current_emotion} -> {emotion}")
        self.current_emotion = emotion

    def advance_background(self):
        self.current_image_index = next_image_index(self.current_emotion, self.current_image_index)
        return self.current_image_index

    # ----- Rendu ----- #

    @property
    def can_submit(self):
        """Le bouton est désactivé si une saisie est vide ou pendant l'analyse"""
        return bool(self.dream) and bool(self.emotions) and not self.is_analyzing

    @property
    def background(self):
        return get_background(self.current_emotion, self.current_image_index)

    def as_context(self):
        return {
            'dream': self.dream,
            'emotions': self.emotions,
            'analysis': self.analysis,
            'is_analyzing': self.is_analyzing,
            'input_error': self.input_error,
            'status': self.status,
            'can_submit': self.can_submit,
            'current_emotion': self.current_emotion,
            'current_emotion_label': format_emotion_label(self.current_emotion),
            'background': self.background,
        }

class DreamAnalysis:
    """
    Résultat d'une analyse : interprétation, signification émotionnelle et
    conseils. Jamais persisté, il vit le temps d'un rendu.
    """

    FIELDS = ('interpretation', 'emotional_significance', 'advice')

    def __init__(self, interpretation, emotional_significance, advice):
        self.interpretation = interpretation
        self.emotional_significance = emotional_significance
        self.advice = advice

    def __eq__(self, other):
        if not isinstance(other, DreamAnalysis):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    @property
    def is_complete(self):
        """Vérifie que les trois sections sont renseignées"""
        return all(getattr(self, field) for field in self.FIELDS)

    def as_dict(self):
        """Retourne l'analyse sous forme de dictionnaire"""
        return {field: getattr(self, field) for field in self.FIELDS}

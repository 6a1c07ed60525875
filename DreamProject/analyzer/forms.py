from django import forms
from django.core.validators import ProhibitNullCharactersValidator

from .utils import validate_input


class RawTextField(forms.CharField):
    """CharField sans rejet du caractère nul : seule la longueur est contrôlée"""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('strip', False)
        super().__init__(**kwargs)
        self.validators = [
            validator for validator in self.validators
            if not isinstance(validator, ProhibitNullCharactersValidator)
        ]


class DreamForm(forms.Form):
    dream = RawTextField(
        label="Describe your dream",
        widget=forms.Textarea(attrs={
            'id': 'dream',
            'rows': 5,
            'placeholder': 'What happened in your dream? Include as many details as you can remember...',
        })
    )
    emotions = RawTextField(
        label="How did you feel?",
        widget=forms.Textarea(attrs={
            'id': 'emotions',
            'rows': 3,
            'placeholder': 'Describe the emotions you experienced during and after the dream...',
        })
    )

    def clean(self):
        cleaned_data = super().clean()
        is_valid, message = validate_input(
            cleaned_data.get('dream') or '',
            cleaned_data.get('emotions') or '',
        )
        if not is_valid:
            # Un seul message, celui du rêve en priorité
            raise forms.ValidationError(message)
        return cleaned_data

    def get_texts(self):
        """Renvoie (rêve, émotions) tels que saisis, pour réafficher le formulaire"""
        return (
            self['dream'].value() or '',
            self['emotions'].value() or '',
        )

    def get_error(self):
        """Premier message d'erreur de validation, '' si la saisie est valide"""
        errors = self.non_field_errors()
        return errors[0] if errors else ''

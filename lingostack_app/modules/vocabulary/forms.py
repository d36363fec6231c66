"""Forms posted by the study pages."""

from flask_wtf import FlaskForm
from wtforms import HiddenField, SelectField, SubmitField
from wtforms.validators import AnyOf, DataRequired, Optional

from .config import VocabularyModuleDefaultConfig, language_label

STUDY_ACTIONS = ('next', 'previous', 'reveal', 'swap', 'languages', 'shuffle', 'restart')

_LANGUAGE_CHOICES = [(lang, language_label(lang)) for lang in VocabularyModuleDefaultConfig.LANGUAGES]


class StudyActionForm(FlaskForm):
    """A single interaction with the current study session (card click, swap, shuffle...)."""

    action = HiddenField('Action', validators=[DataRequired(), AnyOf(STUDY_ACTIONS)])
    submit = SubmitField('Go')


class LanguageForm(FlaskForm):
    """Choose which language is asked and which is answered."""

    action = HiddenField('Action', default='languages', validators=[DataRequired(), AnyOf(['languages'])])
    prompt_language = SelectField('Prompt', choices=_LANGUAGE_CHOICES, validators=[Optional()])
    answer_language = SelectField('Answer', choices=_LANGUAGE_CHOICES, validators=[Optional()])
    submit = SubmitField('Apply')

    def limit_to(self, languages):
        """Restrict both selects to the languages available in the category."""
        choices = [(lang, language_label(lang)) for lang in languages]
        self.prompt_language.choices = choices
        self.answer_language.choices = choices
        return self

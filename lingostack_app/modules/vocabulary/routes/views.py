from flask import current_app, redirect, render_template, request, url_for

from lingostack_app.core.error_handlers import ValidationError
from .. import vocabulary_bp
from ..forms import LanguageForm, StudyActionForm
from ..modes import ModeFactory
from ..services.study_service import StudyService


def _render_study_page(context):
    view = context.build_view()
    language_form = LanguageForm(
        prompt_language=context.session.prompt_language,
        answer_language=context.session.answer_language,
    ).limit_to(context.session.available_languages)

    return render_template(
        'vocabulary/study.html',
        category=context.category,
        mode=context.mode.get_mode_id(),
        modes=ModeFactory.navigation(),
        view=view,
        action_form=StudyActionForm(),
        language_form=language_form,
    )


@vocabulary_bp.route('/<mode>/<category>')
def study(mode, category):
    """Study page for one category in the requested mode."""
    context = StudyService.open(category, mode)
    return _render_study_page(context)


@vocabulary_bp.route('/<mode>/<category>/action', methods=['POST'])
def study_action(mode, category):
    """Apply a card click, swap, shuffle or language change, then redirect back (PRG)."""
    context = StudyService.open(category, mode)

    if request.form.get('action') == 'languages':
        form = LanguageForm()
    else:
        form = StudyActionForm()

    if not form.validate_on_submit():
        raise ValidationError('Invalid study action', errors=form.errors)

    if isinstance(form, LanguageForm):
        StudyService.apply_action(
            context,
            'languages',
            prompt_language=form.prompt_language.data,
            answer_language=form.answer_language.data,
        )
    else:
        StudyService.apply_action(context, form.action.data)

    current_app.logger.debug(f"Applied {form.action.data!r} to {category!r} ({mode})")
    return redirect(url_for('vocabulary.study', mode=mode, category=category))


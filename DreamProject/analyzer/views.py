import json
import time
import logging
from django.conf import settings
from django.shortcuts import render
from django.http import JsonResponse, StreamingHttpResponse
from django.views.decorators.http import require_http_methods
from .forms import DreamForm
from .state import AnalyzerState
from .utils import (
    analyze_dream,
    simulate_thinking_delay,
    get_background,
)
from .constants import ANALYSIS_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def _sse(payload):
    return f"data: {json.dumps(payload)}\n\n"


def _page_context(form, state):
    return {
        'form': form,
        'rotation_seconds': settings.ANALYZER_CONFIG['BACKGROUND_ROTATION_SECONDS'],
        **state.as_context(),
    }


# ----- Vues principales ----- #


@require_http_methods(["GET", "POST"])
def dream_analyzer_view(request):
    """Formulaire d'analyse ; en POST, valide puis affiche le résultat"""
    state = AnalyzerState()

    if request.method == 'POST':
        form = DreamForm(request.POST)

        if state.submit(form):
            start_time = time.time()
            simulate_thinking_delay()
            state.complete(analyze_dream(form.cleaned_data['dream'], form.cleaned_data['emotions']))
            logger.info(
                f"Analyse formulaire réussie - Émotion: {state.current_emotion} "
                f"en {time.time() - start_time:.2f}s"
            )
    else:
        form = DreamForm()

    return render(request, 'analyzer/dream_analyzer.html', _page_context(form, state))


@require_http_methods(["POST"])
def analyse_dream(request):
    """Version SSE (Server-Sent Events) de l'analyse pour affichage progressif des sections"""
    form = DreamForm(request.POST)

    def event_stream():
        start_time = time.time()
        state = AnalyzerState()
        try:
            if not state.submit(form):
                yield _sse({'step': 'error', 'message': state.input_error})
                return
            yield _sse({'step': 'analyzing'})

            simulate_thinking_delay()
            analysis = analyze_dream(form.cleaned_data['dream'], form.cleaned_data['emotions'])
            state.complete(analysis)

            background = state.background
            yield _sse({'step': 'emotion', 'data': {
                'dominant_emotion': state.current_emotion,
                'label': background['label'],
                'background': background,
            }})

            for field, value in analysis.as_dict().items():
                yield _sse({'step': field, 'data': {field: value}})

            total_duration = time.time() - start_time
            logger.info(f"Analyse SSE réussie - Émotion: {state.current_emotion} en {total_duration:.2f}s")
            yield _sse({'step': 'complete', 'success': True})

        except Exception as e:
            duration = time.time() - start_time
            logger.error(f"Erreur analyse SSE après {duration:.2f}s: {e}")
            yield _sse({'step': 'error', 'message': ANALYSIS_ERROR_MESSAGE})

    response = StreamingHttpResponse(event_stream(), content_type='text/event-stream')
    response['Cache-Control'] = 'no-cache'
    return response


@require_http_methods(["GET"])
def background_view(request):
    """Image de fond pour une émotion et un index de rotation"""
    emotion = request.GET.get('emotion', '')
    try:
        index = int(request.GET.get('index', 0))
    except (TypeError, ValueError):
        index = 0

    return JsonResponse(get_background(emotion, index))

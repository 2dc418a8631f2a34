import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST

from advisoryApp.models import Advisory
from advisoryApp.views import recent_advisories
from assistantApp.gateway import AIGatewayError
from chatApp.services import chat_history, send_chat_message
from cropApp.models import Crop
from cropApp.views import recommended_crops
from farmerApp.context import resolve_farmer
from pestApp.views import search_pests_diseases
from resourceApp.views import current_resources
from soilApp.levels import tone
from soilApp.services import run_soil_analysis
from soilApp.wizard import FIELD_RANGES, SOIL_TYPES, SoilWizard, WizardStep, WizardTransitionError
from weatherApp.views import latest_weather

from .i18n import CHAT_SUGGESTIONS, SESSION_KEY, get_language, labels, other_language

logger = logging.getLogger(__name__)

WIZARD_SESSION_KEY = 'soil_wizard'


def dashboard(request):
    farmer = resolve_farmer(request)
    advisories = list(recent_advisories())
    resources = [
        {'resource': resource, 'efficiency': resource.efficiency}
        for resource in current_resources(farmer)
    ]
    context = {
        'farmer': farmer,
        'weather': latest_weather(),
        'crops': recommended_crops(),
        'resources': resources,
        'advisories': advisories,
        'critical_count': sum(1 for a in advisories if a.severity == 'critical'),
    }
    return render(request, 'dashboardApp/dashboard.html', context)


def crops_page(request):
    return render(request, 'dashboardApp/crops.html', {'crops': Crop.objects.all()})


def advisories_page(request):
    advisories = Advisory.objects.order_by('-timestamp', '-id')
    return render(request, 'dashboardApp/advisories.html', {'advisories': advisories})


def pests_page(request):
    search = request.GET.get('search', '')
    context = {
        'pests': search_pests_diseases(search),
        'search': search,
    }
    return render(request, 'dashboardApp/pests.html', context)


@require_http_methods(['GET', 'POST'])
def chat_page(request):
    farmer = resolve_farmer(request)
    language = get_language(request)
    t = labels(language)

    if request.method == 'POST':
        content = request.POST.get('content', '')
        if not content.strip():
            messages.error(request, t['messageRequired'])
        else:
            try:
                send_chat_message(farmer, content, language)
            except AIGatewayError as e:
                logger.error(f"Chat page failed for farmer {farmer.id}: {str(e)}")
                messages.error(request, t['aiError'])
        return redirect('chat')

    context = {
        'chat_messages': chat_history(farmer),
        'suggestions': CHAT_SUGGESTIONS[language],
    }
    return render(request, 'dashboardApp/chat.html', context)


def load_wizard(request):
    return SoilWizard.from_dict(request.session.get(WIZARD_SESSION_KEY))


def save_wizard(request, wizard):
    request.session[WIZARD_SESSION_KEY] = wizard.to_dict()


def levels_from_post(post):
    return {name: post[name] for name in FIELD_RANGES if post.get(name) not in (None, '')}


@require_http_methods(['GET', 'POST'])
def soil_page(request):
    wizard = load_wizard(request)
    t = labels(get_language(request))

    if request.method == 'POST':
        action = request.POST.get('action')
        try:
            if action == 'select':
                wizard.select_soil_type(request.POST.get('soil_type'))
                wizard.advance()
            elif action == 'analyze':
                wizard.set_levels(**levels_from_post(request.POST))
                farmer = resolve_farmer(request)
                wizard.submit(lambda payload: run_soil_analysis(farmer, payload).recommendations)
            elif action == 'reset':
                wizard.reset()
            else:
                messages.error(request, f"Unknown action: {action}")
        except (WizardTransitionError, ValueError) as e:
            messages.error(request, str(e))
        except AIGatewayError as e:
            logger.error(f"Soil wizard analysis failed: {str(e)}")
            messages.error(request, t['soilError'])
        save_wizard(request, wizard)
        return redirect('soil')

    statuses = wizard.statuses()
    readings = [
        {
            'name': name,
            'label': t[label_key],
            'value': wizard.levels[name],
            'min': FIELD_RANGES[name][0],
            'max': FIELD_RANGES[name][1],
            'step': 1 if name in ('nitrogen', 'phosphorus', 'potassium') else 0.1,
            'status': t.get(statuses[name], statuses[name]) if name in statuses else None,
            'tone': tone(statuses[name]) if name in statuses else None,
        }
        for name, label_key in (
            ('nitrogen', 'nitrogenLevel'),
            ('phosphorus', 'phosphorusLevel'),
            ('potassium', 'potassiumLevel'),
            ('ph', 'phLevel'),
            ('organic_matter', 'organicMatter'),
        )
    ]
    context = {
        'wizard': wizard,
        'step': wizard.step.value,
        'step_names': [s.value for s in WizardStep],
        'soil_types': SOIL_TYPES,
        'readings': readings,
    }
    return render(request, 'dashboardApp/soil.html', context)


@require_POST
def toggle_language(request):
    request.session[SESSION_KEY] = other_language(get_language(request))
    next_url = request.POST.get('next') or request.META.get('HTTP_REFERER')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return redirect(next_url)
    return redirect('dashboard')

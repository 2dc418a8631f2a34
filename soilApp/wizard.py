"""
Three-step soil analysis wizard.

    soil-type-selection -> nutrient-entry -> results

Steps only move forward; ``reset`` is the single way back to the start and
restores every reading to its default. The wizard is a plain object that
round-trips through ``to_dict``/``from_dict`` so it can be kept in the
Django session between requests.
"""
import logging
from enum import Enum

from .levels import nutrient_status, ph_status

logger = logging.getLogger(__name__)

SOIL_TYPES = ('clay', 'sandy', 'loamy', 'silty', 'peaty', 'chalky')

# field -> (minimum, maximum, default)
FIELD_RANGES = {
    'nitrogen': (0, 100, 50),
    'phosphorus': (0, 100, 50),
    'potassium': (0, 100, 50),
    'ph': (0, 14, 7.0),
    'organic_matter': (0, 20, 3.0),
}

DEFAULT_LEVELS = {name: default for name, (_, _, default) in FIELD_RANGES.items()}


class WizardStep(Enum):
    SOIL_TYPE_SELECTION = 'soil-type-selection'
    NUTRIENT_ENTRY = 'nutrient-entry'
    RESULTS = 'results'


class WizardTransitionError(Exception):
    """Raised when an action is not allowed in the wizard's current step."""


class SoilWizard:

    def __init__(self, step=WizardStep.SOIL_TYPE_SELECTION, soil_type='', levels=None,
                 recommendation=None, error=None):
        self.step = step
        self.soil_type = soil_type
        self.levels = dict(DEFAULT_LEVELS)
        if levels:
            self.levels.update(levels)
        self.recommendation = recommendation
        self.error = error

    @property
    def step_number(self):
        return list(WizardStep).index(self.step) + 1

    def _require(self, step, action):
        if self.step is not step:
            raise WizardTransitionError(f"Cannot {action} during step '{self.step.value}'")

    def select_soil_type(self, soil_type):
        self._require(WizardStep.SOIL_TYPE_SELECTION, 'select a soil type')
        soil_type = (soil_type or '').strip().lower()
        if soil_type and soil_type not in SOIL_TYPES:
            raise ValueError(f"Unknown soil type: {soil_type}")
        self.soil_type = soil_type

    def advance(self):
        """Move from soil type selection to nutrient entry."""
        self._require(WizardStep.SOIL_TYPE_SELECTION, 'advance')
        if not self.soil_type:
            raise WizardTransitionError("Select a soil type before continuing")
        self.step = WizardStep.NUTRIENT_ENTRY

    def set_levels(self, **levels):
        self._require(WizardStep.NUTRIENT_ENTRY, 'enter nutrient levels')
        for name, value in levels.items():
            if name not in FIELD_RANGES:
                raise ValueError(f"Unknown soil reading: {name}")
            minimum, maximum, _ = FIELD_RANGES[name]
            value = float(value)
            if not minimum <= value <= maximum:
                raise ValueError(f"{name} must be between {minimum} and {maximum}")
            self.levels[name] = value

    def payload(self):
        return {'soil_type': self.soil_type, **self.levels}

    def submit(self, analyze):
        """
        Send the readings to ``analyze`` and show its recommendation.

        The wizard reaches the results step only once the recommendation
        text is returned; if ``analyze`` raises, the wizard stays on nutrient
        entry without a recommendation and the exception propagates.
        """
        self._require(WizardStep.NUTRIENT_ENTRY, 'submit')
        self.error = None
        try:
            recommendation = analyze(self.payload())
        except Exception as e:
            self.recommendation = None
            self.error = str(e)
            logger.warning(f"Soil analysis failed, staying on nutrient entry: {str(e)}")
            raise
        self.recommendation = recommendation
        self.step = WizardStep.RESULTS
        return recommendation

    def reset(self):
        self.step = WizardStep.SOIL_TYPE_SELECTION
        self.soil_type = ''
        self.levels = dict(DEFAULT_LEVELS)
        self.recommendation = None
        self.error = None

    def statuses(self):
        return {
            'nitrogen': nutrient_status(self.levels['nitrogen']),
            'phosphorus': nutrient_status(self.levels['phosphorus']),
            'potassium': nutrient_status(self.levels['potassium']),
            'ph': ph_status(self.levels['ph']),
        }

    def to_dict(self):
        return {
            'step': self.step.value,
            'soil_type': self.soil_type,
            'levels': dict(self.levels),
            'recommendation': self.recommendation,
            'error': self.error,
        }

    @classmethod
    def from_dict(cls, data):
        if not data:
            return cls()
        return cls(
            step=WizardStep(data.get('step', WizardStep.SOIL_TYPE_SELECTION.value)),
            soil_type=data.get('soil_type', ''),
            levels=data.get('levels'),
            recommendation=data.get('recommendation'),
            error=data.get('error'),
        )

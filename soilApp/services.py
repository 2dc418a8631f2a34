import logging

from assistantApp.gateway import analyze_soil
from .models import SoilAnalysis

logger = logging.getLogger(__name__)


def run_soil_analysis(farmer, data, client=None):
    """
    Get AI recommendations for a validated soil profile and store the result.

    Nothing is written when the AI call fails; ``AIGatewayError`` propagates.
    """
    recommendations = analyze_soil(data, client=client)
    analysis = SoilAnalysis.objects.create(
        farmer=farmer,
        soil_type=data['soil_type'],
        nitrogen=data.get('nitrogen'),
        phosphorus=data.get('phosphorus'),
        potassium=data.get('potassium'),
        ph=data.get('ph'),
        organic_matter=data.get('organic_matter'),
        recommendations=recommendations,
    )
    logger.info(f"Stored soil analysis {analysis.id} for farmer {farmer.id}")
    return analysis

import calendar
import logging

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from advisoryApp.models import Advisory
from chatApp.models import ChatMessage
from cropApp.models import Crop
from farmerApp.models import Farmer
from pestApp.models import PestDisease
from resourceApp.models import Resource
from soilApp.models import SoilAnalysis
from weatherApp.models import WeatherData

logger = logging.getLogger(__name__)

CROPS = [
    {
        'name': "Wheat", 'season': "Rabi (Winter)", 'soil_type': "loamy", 'water_requirement': "Medium",
        'expected_yield': 2500, 'profit_estimate': 45000, 'growth_duration': 120,
        'description': "High-yielding wheat variety suitable for winter season",
    },
    {
        'name': "Rice", 'season': "Kharif (Monsoon)", 'soil_type': "clay", 'water_requirement': "High",
        'expected_yield': 3000, 'profit_estimate': 55000, 'growth_duration': 130,
        'description': "Water-intensive crop ideal for monsoon cultivation",
    },
    {
        'name': "Cotton", 'season': "Kharif (Monsoon)", 'soil_type': "sandy", 'water_requirement': "Medium",
        'expected_yield': 1500, 'profit_estimate': 65000, 'growth_duration': 150,
        'description': "Cash crop with good market demand",
    },
    {
        'name': "Sugarcane", 'season': "Year-round", 'soil_type': "loamy", 'water_requirement': "High",
        'expected_yield': 70000, 'profit_estimate': 120000, 'growth_duration': 365,
        'description': "Long-duration crop requiring consistent irrigation",
    },
    {
        'name': "Maize", 'season': "Kharif (Monsoon)", 'soil_type': "loamy", 'water_requirement': "Medium",
        'expected_yield': 2800, 'profit_estimate': 42000, 'growth_duration': 90,
        'description': "Versatile crop suitable for various soil types",
    },
    {
        'name': "Mustard", 'season': "Rabi (Winter)", 'soil_type': "sandy", 'water_requirement': "Low",
        'expected_yield': 1200, 'profit_estimate': 35000, 'growth_duration': 110,
        'description': "Oil seed crop requiring minimal water",
    },
]

WEATHER = {
    'location': "Punjab, India",
    'temperature': 28,
    'humidity': 65,
    'rainfall': 0,
    'wind_speed': 12,
    'condition': "Partly Cloudy",
    'forecast': [
        {'day': "Tomorrow", 'temp': 29, 'condition': "Sunny"},
        {'day': "Day 2", 'temp': 30, 'condition': "Sunny"},
        {'day': "Day 3", 'temp': 27, 'condition': "Rainy"},
        {'day': "Day 4", 'temp': 26, 'condition': "Cloudy"},
        {'day': "Day 5", 'temp': 28, 'condition': "Partly Cloudy"},
    ],
    'advisory': "Good conditions for irrigation",
}

RESOURCES = [
    {'resource_type': "water", 'used': 850, 'optimal': 1000, 'unit': "liters"},
    {'resource_type': "fertilizer", 'used': 45, 'optimal': 50, 'unit': "kg"},
    {'resource_type': "pesticide", 'used': 3.5, 'optimal': 5, 'unit': "liters"},
]

ADVISORIES = [
    {
        'for_farmer': True,
        'title': "Optimal Time for Wheat Sowing",
        'content': "Based on current weather patterns, the next 2 weeks are ideal for wheat sowing. Soil temperature "
                   "is optimal at 18-22°C. Ensure proper land preparation and seed treatment before sowing.",
        'category': "crop-guidance", 'severity': "info", 'source': "Agricultural Department",
    },
    {
        'for_farmer': False,
        'title': "Pest Alert: Brown Plant Hopper in Rice",
        'content': "Increased brown plant hopper activity detected in nearby regions. Monitor your rice fields "
                   "closely. Use recommended pesticides if infestation is noticed. Maintain proper water levels.",
        'category': "pest-alert", 'severity': "warning", 'source': "Pest Surveillance Network",
    },
    {
        'for_farmer': False,
        'title': "Heavy Rainfall Expected",
        'content': "Meteorological department predicts heavy rainfall in the next 48 hours. Ensure proper drainage "
                   "in fields. Delay fertilizer application until after rain. Protect harvested crops.",
        'category': "weather", 'severity': "critical", 'source': "Weather Department",
    },
]

PESTS_DISEASES = [
    {
        'name': "Stem Borer", 'type': "pest", 'crop_affected': "Rice", 'severity': "high",
        'symptoms': [
            "Dead hearts in vegetative stage",
            "White ears in reproductive stage",
            "Tunnels in stem filled with frass",
            "Wilting of central shoot",
        ],
        'treatment': "Apply Cartap hydrochloride or Chlorantraniliprole as per recommendation. Use pheromone "
                     "traps for monitoring. Maintain proper water level in fields.",
        'prevention': "Use resistant varieties. Practice crop rotation. Remove stubbles after harvest. Avoid "
                      "excessive nitrogen fertilizer.",
    },
    {
        'name': "Leaf Rust", 'type': "disease", 'crop_affected': "Wheat", 'severity': "medium",
        'symptoms': [
            "Orange-brown pustules on leaves",
            "Premature leaf drying",
            "Reduced grain filling",
            "Scattered distribution on lower leaves initially",
        ],
        'treatment': "Spray Propiconazole or Tebuconazole at recommended doses. Apply at early infection stage. "
                     "Repeat after 15 days if needed.",
        'prevention': "Use resistant wheat varieties. Ensure balanced fertilization. Avoid late sowing. Remove "
                      "volunteer wheat plants.",
    },
    {
        'name': "Aphids", 'type': "pest", 'crop_affected': "Mustard", 'severity': "high",
        'symptoms': [
            "Yellowing of leaves",
            "Stunted plant growth",
            "Honeydew secretion on plants",
            "Sooty mold on leaves",
        ],
        'treatment': "Spray Dimethoate or Imidacloprid. Use neem-based organic pesticides for eco-friendly "
                     "control. Apply early morning or evening.",
        'prevention': "Intercrop with companion plants. Use yellow sticky traps. Encourage natural predators like "
                      "ladybugs. Avoid water stress.",
    },
    {
        'name': "Late Blight", 'type': "disease", 'crop_affected': "Potato", 'severity': "high",
        'symptoms': [
            "Water-soaked lesions on leaves",
            "White fungal growth on leaf undersides",
            "Rapid browning and death of foliage",
            "Brown rot in tubers",
        ],
        'treatment': "Apply Mancozeb or Metalaxyl + Mancozeb combination. Spray at 7-10 day intervals during "
                     "favorable conditions. Destroy infected plants.",
        'prevention': "Use certified disease-free seed. Plant resistant varieties. Ensure proper spacing for air "
                      "circulation. Avoid overhead irrigation.",
    },
    {
        'name': "White Grub", 'type': "pest", 'crop_affected': "Sugarcane", 'severity': "medium",
        'symptoms': [
            "Yellowing and wilting of shoots",
            "Poor tillering",
            "Damaged roots with grubs present",
            "Patches of dead plants in field",
        ],
        'treatment': "Apply Chlorpyrifos in irrigation water. Use entomopathogenic nematodes for biological "
                     "control. Treat at planting time.",
        'prevention': "Deep summer plowing to expose grubs. Use sett treatment before planting. Maintain field "
                      "sanitation. Rotate with non-host crops.",
    },
    {
        'name': "Powdery Mildew", 'type': "disease", 'crop_affected': "Cotton", 'severity': "low",
        'symptoms': [
            "White powdery patches on leaves",
            "Curling and distortion of leaves",
            "Reduced photosynthesis",
            "Premature leaf drop",
        ],
        'treatment': "Spray Sulphur or Triadimefon. Use wettable sulphur for organic treatment. Apply at early "
                     "infection stage.",
        'prevention': "Maintain proper plant spacing. Avoid excessive nitrogen fertilization. Use resistant "
                      "varieties. Practice crop rotation.",
    },
]


class Command(BaseCommand):
    help = "Seed the database with a demo farmer and reference data."

    def add_arguments(self, parser):
        parser.add_argument(
            '--flush',
            action='store_true',
            help="Delete existing demo data before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['flush']:
            for model in (ChatMessage, SoilAnalysis, Resource, Advisory, PestDisease, WeatherData, Crop):
                model.objects.all().delete()
            self.stdout.write("Cleared existing demo data")
        elif Crop.objects.exists():
            logger.info("Demo data already present, skipping seed")
            self.stdout.write(self.style.WARNING("Demo data already present; run with --flush to reseed"))
            return

        farmer, _ = Farmer.objects.update_or_create(
            id=settings.DEFAULT_FARMER_ID,
            defaults=dict(settings.DEFAULT_FARMER),
        )
        self.report("farmers", 1)

        crops = Crop.objects.bulk_create([Crop(**crop) for crop in CROPS])
        self.report("crops", len(crops))

        WeatherData.objects.create(**WEATHER)
        self.report("weather records", 1)

        now = timezone.localtime()
        month, year = calendar.month_name[now.month], now.year
        resources = Resource.objects.bulk_create([
            Resource(farmer=farmer, month=month, year=year, **resource) for resource in RESOURCES
        ])
        self.report("resource records", len(resources))

        advisories = []
        for data in ADVISORIES:
            data = dict(data)
            for_farmer = data.pop('for_farmer')
            advisories.append(Advisory.objects.create(farmer=farmer if for_farmer else None, **data))
        self.report("advisories", len(advisories))

        pests = PestDisease.objects.bulk_create([PestDisease(**pest) for pest in PESTS_DISEASES])
        self.report("pests and diseases", len(pests))

        self.stdout.write(self.style.SUCCESS("Database seeding completed successfully"))

    def report(self, label, count):
        logger.info(f"Seeded {count} {label}")
        self.stdout.write(f"Seeded {count} {label}")

LANGUAGES = ('en', 'hi')
DEFAULT_LANGUAGE = 'en'
SESSION_KEY = 'language'

TRANSLATIONS = {
    'en': {
        'appName': 'Krishi Advisor',
        'language': 'English',
        'switchLanguage': 'हि',
        'welcome': 'Welcome',
        'dashboard': 'Your farm at a glance',
        'home': 'Dashboard',
        'weather': 'Weather',
        'forecast': 'Forecast',
        'humidity': 'Humidity',
        'rainfall': 'Rainfall',
        'windSpeed': 'Wind Speed',
        'noWeather': 'No weather data available',
        'recommendedCrops': 'Recommended Crops',
        'crops': 'Crops',
        'season': 'Season',
        'soilType': 'Soil Type',
        'waterRequirement': 'Water Requirement',
        'expectedYield': 'Expected Yield',
        'profitEstimate': 'Profit Estimate',
        'growthDuration': 'Growth Duration',
        'days': 'days',
        'resourceUsage': 'Resource Usage',
        'noResources': 'No resource usage recorded this month',
        'efficient': 'Efficient',
        'warning': 'Warning',
        'critical': 'Critical',
        'info': 'Info',
        'advisories': 'Advisories',
        'recentAdvisories': 'Recent Advisories',
        'urgentAlerts': 'urgent alerts need your attention',
        'noAdvisories': 'No advisories yet',
        'viewAll': 'View all',
        'pestsDiseases': 'Pests & Diseases',
        'search': 'Search',
        'searchPests': 'Search pests or diseases...',
        'symptoms': 'Symptoms',
        'treatment': 'Treatment',
        'prevention': 'Prevention',
        'noResults': 'Nothing matches your search',
        'chat': 'AI Assistant',
        'askQuestion': 'Ask a farming question...',
        'send': 'Send',
        'suggestions': 'Try asking',
        'you': 'You',
        'assistant': 'Assistant',
        'messageRequired': 'Message content is required',
        'aiError': 'The assistant could not answer right now. Please try again.',
        'soilAnalysis': 'Soil Analysis',
        'selectSoilType': 'Select your soil type',
        'nutrientLevels': 'Nutrient Levels',
        'nitrogenLevel': 'Nitrogen (N)',
        'phosphorusLevel': 'Phosphorus (P)',
        'potassiumLevel': 'Potassium (K)',
        'phLevel': 'pH Level',
        'organicMatter': 'Organic Matter',
        'next': 'Next',
        'getRecommendations': 'Get Recommendations',
        'results': 'Results',
        'recommendations': 'Recommendations',
        'newAnalysis': 'New Analysis',
        'soilError': 'Soil analysis failed. Please try again.',
        'low': 'Low',
        'medium': 'Medium',
        'high': 'High',
    },
    'hi': {
        'appName': 'कृषि सलाहकार',
        'language': 'हिंदी',
        'switchLanguage': 'En',
        'welcome': 'स्वागत है',
        'dashboard': 'आपके खेत की एक झलक',
        'home': 'डैशबोर्ड',
        'weather': 'मौसम',
        'forecast': 'पूर्वानुमान',
        'humidity': 'नमी',
        'rainfall': 'वर्षा',
        'windSpeed': 'हवा की गति',
        'noWeather': 'मौसम डेटा उपलब्ध नहीं है',
        'recommendedCrops': 'अनुशंसित फसलें',
        'crops': 'फसलें',
        'season': 'मौसम',
        'soilType': 'मिट्टी का प्रकार',
        'waterRequirement': 'पानी की आवश्यकता',
        'expectedYield': 'अपेक्षित उपज',
        'profitEstimate': 'अनुमानित लाभ',
        'growthDuration': 'विकास अवधि',
        'days': 'दिन',
        'resourceUsage': 'संसाधन उपयोग',
        'noResources': 'इस महीने कोई संसाधन उपयोग दर्ज नहीं है',
        'efficient': 'कुशल',
        'warning': 'चेतावनी',
        'critical': 'गंभीर',
        'info': 'जानकारी',
        'advisories': 'सलाह',
        'recentAdvisories': 'हाल की सलाह',
        'urgentAlerts': 'तत्काल अलर्ट पर ध्यान दें',
        'noAdvisories': 'अभी कोई सलाह नहीं',
        'viewAll': 'सभी देखें',
        'pestsDiseases': 'कीट और रोग',
        'search': 'खोजें',
        'searchPests': 'कीट या रोग खोजें...',
        'symptoms': 'लक्षण',
        'treatment': 'उपचार',
        'prevention': 'रोकथाम',
        'noResults': 'आपकी खोज से कुछ नहीं मिला',
        'chat': 'AI सहायक',
        'askQuestion': 'खेती से जुड़ा सवाल पूछें...',
        'send': 'भेजें',
        'suggestions': 'यह पूछकर देखें',
        'you': 'आप',
        'assistant': 'सहायक',
        'messageRequired': 'संदेश लिखना आवश्यक है',
        'aiError': 'सहायक अभी उत्तर नहीं दे सका। कृपया पुनः प्रयास करें।',
        'soilAnalysis': 'मिट्टी विश्लेषण',
        'selectSoilType': 'अपनी मिट्टी का प्रकार चुनें',
        'nutrientLevels': 'पोषक स्तर',
        'nitrogenLevel': 'नाइट्रोजन (N)',
        'phosphorusLevel': 'फॉस्फोरस (P)',
        'potassiumLevel': 'पोटैशियम (K)',
        'phLevel': 'pH स्तर',
        'organicMatter': 'जैविक पदार्थ',
        'next': 'आगे',
        'getRecommendations': 'सिफारिशें प्राप्त करें',
        'results': 'परिणाम',
        'recommendations': 'सिफारिशें',
        'newAnalysis': 'नया विश्लेषण',
        'soilError': 'मिट्टी विश्लेषण विफल रहा। कृपया पुनः प्रयास करें।',
        'low': 'कम',
        'medium': 'मध्यम',
        'high': 'अधिक',
    },
}

CHAT_SUGGESTIONS = {
    'en': [
        "What crops should I plant this season?",
        "How to manage pest in wheat crop?",
        "When to apply fertilizer?",
    ],
    'hi': [
        "इस मौसम में मुझे कौन सी फसलें लगानी चाहिए?",
        "गेहूं की फसल में कीट प्रबंधन कैसे करें?",
        "उर्वरक कब डालना चाहिए?",
    ],
}


def get_language(request):
    language = request.session.get(SESSION_KEY, DEFAULT_LANGUAGE)
    return language if language in LANGUAGES else DEFAULT_LANGUAGE


def other_language(language):
    return 'hi' if language == 'en' else 'en'


def labels(language):
    return TRANSLATIONS.get(language, TRANSLATIONS[DEFAULT_LANGUAGE])

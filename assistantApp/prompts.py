CHAT_SYSTEM_PROMPTS = {
    'en': (
        "You are an expert agricultural advisor helping farmers with crop selection, "
        "pest management, fertilizer usage, soil health, and general farming practices. "
        "Provide clear, practical advice in English. Use simple language that farmers "
        "can easily understand."
    ),
    'hi': (
        "आप एक विशेषज्ञ कृषि सलाहकार हैं जो किसानों को फसल चयन, कीट प्रबंधन, उर्वरक उपयोग, "
        "मिट्टी स्वास्थ्य और सामान्य कृषि प्रथाओं में मदद करते हैं। हिंदी में स्पष्ट, व्यावहारिक "
        "सलाह दें। सरल भाषा का उपयोग करें।"
    ),
}

SOIL_SYSTEM_PROMPT = "You are an agricultural soil scientist providing practical advice to farmers."

SOIL_ANALYSIS_TEMPLATE = """Analyze this soil sample and provide detailed fertilizer recommendations:

Soil Type: {soil_type}
Nitrogen (N): {nitrogen}%
Phosphorus (P): {phosphorus}%
Potassium (K): {potassium}%
pH Level: {ph}
Organic Matter: {organic_matter}%

Provide:
1. Soil health assessment
2. Specific fertilizer recommendations with quantities
3. pH adjustment suggestions if needed
4. Best crops for this soil condition
5. Organic amendments to improve soil quality

Format as clear, actionable advice for farmers."""


def chat_system_prompt(language):
    return CHAT_SYSTEM_PROMPTS.get(language, CHAT_SYSTEM_PROMPTS['en'])


def soil_analysis_prompt(soil_type, nitrogen, phosphorus, potassium, ph, organic_matter):
    return SOIL_ANALYSIS_TEMPLATE.format(
        soil_type=soil_type,
        nitrogen=nitrogen,
        phosphorus=phosphorus,
        potassium=potassium,
        ph=ph,
        organic_matter=organic_matter,
    )

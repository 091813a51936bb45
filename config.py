from dotenv import load_dotenv
import os

load_dotenv()

# Configuration class for the application
class Config:
    # Word similarity
    CONTAINMENT_SIMILARITY = 0.9
    SUBSTITUTION_SIMILARITY = 0.95
    PHONETIC_EXACT_SIMILARITY = 0.9
    PHONETIC_SCALE = 0.8

    # Word accuracy bands (similarity) and the credit each band earns
    CORRECT_THRESHOLD = 0.85
    PARTIAL_THRESHOLD = 0.55
    MINIMAL_THRESHOLD = 0.3
    PARTIAL_CREDIT = 0.8
    MINIMAL_CREDIT = 0.2

    # Attempts with no correct word and fewer than this share of partial
    # matches are scored as unrelated speech
    UNRELATED_SPEECH_MIN_MATCH_SHARE = 0.5

    EXTRA_WORD_PENALTY = 5
    EXTRA_WORD_HEAVY_PENALTY = 10  # per extra word once there are more than two
    HIGH_SCORE_BOOST = 8  # score >= 70
    MEDIUM_SCORE_BOOST = 5  # score >= 50

    # Duration estimation
    SYLLABLES_PER_SECOND = 3.5
    DURATION_BUFFER_MS = 1000

    # Timing ratio bands (actual / expected)
    TOO_FAST_RATIO = 0.7
    SLIGHTLY_SLOW_RATIO = 1.5
    TOO_SLOW_RATIO = 2.0

    # Fluency
    MIN_INTERIM_EVENTS = 2
    FAST_SHORT_ATTEMPT_RATIO = 0.8
    FAST_EVENTS_PER_SECOND = 5
    SLOW_EVENTS_PER_SECOND = 1

    # Overall score weights
    WORD_ACCURACY_WEIGHT = 0.6
    TIMING_WEIGHT = 0.2
    FLUENCY_WEIGHT = 0.2

    CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
    CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")

    # Gemini API Configuration (optional, enables coaching summaries)
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite")

    LANGUAGES = {
        "english": {
            "name": "English",
            "recognition_lang": "en-US",
            "tts_lang": "en-US",
            "fallback_tts": "en-GB",
        },
        "spanish": {
            "name": "Spanish",
            "recognition_lang": "es-MX",  # Mexican Spanish preferred
            "tts_lang": "es-MX",
            "fallback_tts": "es-ES",
        },
        "french": {
            "name": "French",
            "recognition_lang": "fr-FR",
            "tts_lang": "fr-FR",
            "fallback_tts": "fr-FR",
        },
        "german": {
            "name": "German",
            "recognition_lang": "de-DE",
            "tts_lang": "de-DE",
            "fallback_tts": "de-DE",
        },
    }

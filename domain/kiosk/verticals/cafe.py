# domain/kiosk/verticals/cafe.py

# Heuristic tables for the drink recommender. Scores are "cost": lower wins.
KIOSK_VERTICAL_CAFE = {
    "kiosk_type": "cafe",

    "type_scoring": {
        "baseline": {"hot": 50, "iced": 50, "frappe": 50},

        "by_time_of_day": {
            "morning": {"hot": -8, "iced": -2},
            "midday": {"iced": -8, "frappe": -5, "hot": 5},
            "afternoon": {"iced": -8, "frappe": -5, "hot": 5},
            "evening": {"hot": -6, "iced": 4, "frappe": 6},
            "late-night": {"hot": -6, "iced": 4, "frappe": 6},
            "night": {"hot": -6, "iced": 4, "frappe": 6},
        },

        # inclusive thresholds in Celsius
        "hot_weather": {"min_temp": 29, "adjust": {"iced": -10, "frappe": -7, "hot": 10}},
        "cool_weather": {"max_temp": 23, "adjust": {"hot": -10, "iced": 5}},
    },

    "size_order": ["S", "Regular", "M", "L"],
    # buckets that get the smallest size; every other bucket gets the largest
    "small_size_buckets": ["morning", "evening", "late-night", "night"],

    "sweetness": {
        "western_languages": ["en", "fr", "ru"],
        "dessert_profile": "dessert-drink",
        "dessert_pick": ["100"],
        "western_pick": ["75", "50"],
        "morning_pick": ["75"],
        "default_pick": ["100"],
        "fallback": "100",
    },
}

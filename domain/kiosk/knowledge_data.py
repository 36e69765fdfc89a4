# domain/kiosk/knowledge_data.py
#
# Curated drink profiles keyed by the Thai menu name as it appears in the
# catalog sheet. Profile tags:
#   temperature  hot | cold | frozen
#   texture      creamy | light-body | foamy | indulgent
#   function     caffeinated | kids-friendly | dessert-drink | thirst-quencher
#   moment       morning | afternoon | evening | summer | large-size
#   culture      thai-palate | allcafe-signature

MENU_KNOWLEDGE = {
    # coffee
    "กาแฟร้อน Signature": {
        "main_flavor": "espresso",
        "profile": [
            "hot", "caffeinated", "rich", "aromatic",
            "morning"
        ],
        "base": "coffee",
    },
    "เอสเพรสโซ่ร้อน": {
        "main_flavor": "espresso",
        "profile": ["hot", "caffeinated", "strong", "short-drink", "morning"],
        "base": "coffee",
    },
    "เอสเพรสโซ่เย็น": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "strong", "refreshing", "afternoon"],
        "base": "coffee",
    },
    "เอสเพรสโซ่เย็น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "strong", "refreshing", "large-size", "takeout"],
        "base": "coffee",
    },
    "เอสเพรสโซ่ปั่น": {
        "main_flavor": "espresso",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink", "indulgent"],
        "base": "coffee",
    },
    "เอสเพรสโซ่ปั่น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink", "indulgent", "large-size"],
        "base": "coffee",
    },
    "เอสเพรสโซ่signature": {
        "main_flavor": "espresso",
        "profile": ["caffeinated", "rich", "premium", "allcafe-signature"],
        "base": "coffee",
    },

    "อเมริกาโน่ร้อน": {
        "main_flavor": "espresso",
        "profile": ["hot", "caffeinated", "light-body", "no-milk", "low-cal", "morning"],
        "base": "coffee",
    },
    "อเมริกาโน่เย็น": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "light-body", "thirst-quencher", "summer"],
        "base": "coffee",
    },
    "อเมริกาโน่เย็น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "light-body", "thirst-quencher", "summer", "large-size"],
        "base": "coffee",
    },

    "อเมริกาโน่น้ำผึ้งเย็น": {
        "main_flavor": "honey",
        "profile": ["cold", "caffeinated", "light-sweet", "refreshing", "no-milk"],
        "base": "coffee",
    },
    "อเมริกาโน่น้ำผึ้งเย็น 22 ออนซ์": {
        "main_flavor": "honey",
        "profile": ["cold", "caffeinated", "light-sweet", "refreshing", "no-milk", "large-size"],
        "base": "coffee",
    },
    "อเมริกาโน่น้ำผึ้งร้อน": {
        "main_flavor": "honey",
        "profile": ["hot", "caffeinated", "light-sweet", "comfort"],
        "base": "coffee",
    },

    "อเมริกาโน่น้ำส้ม": {
        "main_flavor": "orange",
        "profile": ["cold", "caffeinated", "citrus", "refreshing", "summer", "trend"],
        "base": "coffee",
    },

    "ลาเต้ร้อน": {
        "main_flavor": "espresso",
        "profile": ["hot", "caffeinated", "milky", "smooth", "comfort", "morning"],
        "base": "coffee",
    },
    "ลาเต้เย็น": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "milky", "smooth", "refreshing"],
        "base": "coffee",
    },
    "ลาเต้เย็น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "milky", "smooth", "refreshing", "large-size"],
        "base": "coffee",
    },
    "ลาเต้ปั่น": {
        "main_flavor": "espresso",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink", "sweet"],
        "base": "coffee",
    },
    "ลาเต้ปั่น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink", "sweet", "large-size"],
        "base": "coffee",
    },

    "คาปูชิโน่ร้อน": {
        "main_flavor": "espresso",
        "profile": ["hot", "caffeinated", "foamy", "aromatic", "morning"],
        "base": "coffee",
    },
    "คาปูชิโน่เย็น": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "milky", "refreshing"],
        "base": "coffee",
    },
    "คาปูชิโน่เย็น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "milky", "refreshing", "large-size"],
        "base": "coffee",
    },
    "คาปูชิโน่ปั่น": {
        "main_flavor": "espresso",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink"],
        "base": "coffee",
    },
    "คาปูชิโน่ปั่น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink", "large-size"],
        "base": "coffee",
    },

    "มอคค่าร้อน": {
        "main_flavor": "chocolate",
        "profile": ["hot", "caffeinated", "creamy", "choco", "comfort"],
        "base": "coffee",
    },
    "มอคค่าเย็น": {
        "main_flavor": "chocolate",
        "profile": ["cold", "caffeinated", "creamy", "sweet"],
        "base": "coffee",
    },
    "มอคค่าเย็น22ออนซ์": {
        "main_flavor": "chocolate",
        "profile": ["cold", "caffeinated", "creamy", "sweet", "large-size"],
        "base": "coffee",
    },
    "มอคค่าปั่น": {
        "main_flavor": "chocolate",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink", "indulgent"],
        "base": "coffee",
    },
    "มอคค่าปั่น22ออนซ์": {
        "main_flavor": "chocolate",
        "profile": ["frozen", "caffeinated", "creamy", "dessert-drink", "indulgent", "large-size"],
        "base": "coffee",
    },

    "มัคคิอาโต้เย็น": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "layered", "milky", "sweet"],
        "base": "coffee",
    },
    "มัคคิอาโตเย็น22ออนซ์": {
        "main_flavor": "espresso",
        "profile": ["cold", "caffeinated", "layered", "milky", "sweet", "large-size"],
        "base": "coffee",
    },

    # chocolate
    "ช็อกโกแลตร้อน": {
        "main_flavor": "chocolate",
        "profile": ["hot", "creamy", "sweet", "comfort", "kids-friendly", "evening"],
        "base": "chocolate",
    },
    "ช็อกโกแลตเย็น": {
        "main_flavor": "chocolate",
        "profile": ["cold", "creamy", "sweet", "kids-friendly"],
        "base": "chocolate",
    },
    "ช็อกโกแลตเย็น22ออนซ์": {
        "main_flavor": "chocolate",
        "profile": ["cold", "creamy", "sweet", "kids-friendly", "large-size"],
        "base": "chocolate",
    },
    "ช็อกโกแลตปั่น": {
        "main_flavor": "chocolate",
        "profile": ["frozen", "creamy", "sweet", "dessert-drink"],
        "base": "chocolate",
    },
    "ช็อกโกแลตปั่น22ออนซ์": {
        "main_flavor": "chocolate",
        "profile": ["frozen", "creamy", "sweet", "dessert-drink", "large-size"],
        "base": "chocolate",
    },
    "ช็อกโกแลตsignature": {
        "main_flavor": "chocolate",
        "profile": ["cold", "creamy", "sweet", "premium", "allcafe-signature"],
        "base": "chocolate",
    },

    # tea: matcha, black, lemon
    "ชาเขียวนมมัทฉะร้อน": {
        "main_flavor": "matcha",
        "profile": ["hot", "tea-based", "creamy", "earthy", "comfort"],
        "base": "tea",
    },
    "ชาเขียวนมมัทฉะเย็น": {
        "main_flavor": "matcha",
        "profile": ["cold", "tea-based", "creamy", "sweet", "refreshing"],
        "base": "tea",
    },
    "ชาเขียวนมมัทฉะเย็น22ออนซ์": {
        "main_flavor": "matcha",
        "profile": ["cold", "tea-based", "creamy", "sweet", "refreshing", "large-size"],
        "base": "tea",
    },
    "ชาเขียวนมมัทฉะปั่น": {
        "main_flavor": "matcha",
        "profile": ["frozen", "tea-based", "creamy", "dessert-drink", "sweet"],
        "base": "tea",
    },
    "ชาเขียวนมมัทฉะปั่น22ออนซ์": {
        "main_flavor": "matcha",
        "profile": ["frozen", "tea-based", "creamy", "dessert-drink", "sweet", "large-size"],
        "base": "tea",
    },

    "เพียวมัทฉะเย็น": {
        "main_flavor": "matcha",
        "profile": ["cold", "tea-based", "less-milky", "japanese-style", "refreshing"],
        "base": "tea",
    },

    "ชาดำน้ำผึ้งเย็น": {
        "main_flavor": "honey",
        "profile": ["cold", "refreshing", "light-sweet", "tea-based", "thirst-quencher"],
        "base": "tea",
    },
    "ชาดำน้ำผึ้งเย็น22oz.": {
        "main_flavor": "honey",
        "profile": ["cold", "refreshing", "light-sweet", "tea-based", "thirst-quencher", "large-size"],
        "base": "tea",
    },

    "ชามะนาวเย็น": {
        "main_flavor": "lemon",
        "profile": ["cold", "refreshing", "citrus", "summer", "thirst-quencher"],
        "base": "tea",
    },
    "ชามะนาวเย็น22ออนซ์": {
        "main_flavor": "lemon",
        "profile": ["cold", "refreshing", "citrus", "summer", "thirst-quencher", "large-size"],
        "base": "tea",
    },

    # thai favourites
    "ชานมเย็น": {
        "main_flavor": "thai tea",
        "profile": ["cold", "creamy", "sweet", "bold", "thai-palate", "refreshing"],
        "base": "tea",
    },
    "ชานมเย็น22ออนซ์": {
        "main_flavor": "thai tea",
        "profile": ["cold", "creamy", "sweet", "bold", "thai-palate", "refreshing", "large-size"],
        "base": "tea",
    },
    "ชานมปั่น": {
        "main_flavor": "thai tea",
        "profile": ["frozen", "creamy", "sweet", "thai-palate", "dessert-drink"],
        "base": "tea",
    },
    "ชานมปั่น22ออนซ์": {
        "main_flavor": "thai tea",
        "profile": ["frozen", "creamy", "sweet", "thai-palate", "dessert-drink", "large-size"],
        "base": "tea",
    },

    "ชานมร้อน": {
        "main_flavor": "thai tea",
        "profile": ["hot", "creamy", "sweet", "thai-palate", "comfort"],
        "base": "tea",
    },

    "ชานมไต้หวันเย็น": {
        "main_flavor": "black tea",
        "profile": ["cold", "creamy", "sweet", "trend", "refreshing"],
        "base": "tea",
    },
    "ชานมไต้หวันเย็น22ออนซ์": {
        "main_flavor": "black tea",
        "profile": ["cold", "creamy", "sweet", "trend", "refreshing", "large-size"],
        "base": "tea",
    },

    "นมชมพูเย็น": {
        "main_flavor": "sala",
        "profile": ["cold", "creamy", "sweet", "fragrant", "thai-palate", "kids-friendly"],
        "base": "milk",
    },
    "นมชมพูเย็น 22 ออนซ์": {
        "main_flavor": "sala",
        "profile": ["cold", "creamy", "sweet", "fragrant", "thai-palate", "kids-friendly", "large-size"],
        "base": "milk",
    },
    "นมชมพูปั่น": {
        "main_flavor": "sala",
        "profile": ["frozen", "creamy", "sweet", "fragrant", "thai-palate", "dessert-drink"],
        "base": "milk",
    },
    "นมชมพูปั่น 22 ออนซ์": {
        "main_flavor": "sala",
        "profile": ["frozen", "creamy", "sweet", "fragrant", "thai-palate", "dessert-drink", "large-size"],
        "base": "milk",
    },

    "แดงมะนาวโซดาเย็น": {
        "main_flavor": "sala-lime",
        "profile": ["cold", "refreshing", "bubbly", "citrus", "fragrant", "thai-palate", "summer"],
        "base": "soda",
    },
    "แดงมะนาวโซดาเย็น 22 ออนซ์-G": {
        "main_flavor": "sala-lime",
        "profile": ["cold", "refreshing", "bubbly", "citrus", "fragrant", "thai-palate", "summer", "large-size"],
        "base": "soda",
    },

    # milk
    "นมสดร้อน": {
        "main_flavor": "milk",
        "profile": ["hot", "creamy", "comfort", "kids-friendly", "evening"],
        "base": "milk",
    },
    "นมสดเย็น": {
        "main_flavor": "milk",
        "profile": ["cold", "creamy", "light-sweet", "refreshing"],
        "base": "milk",
    },
    "นมสดเย็น 22 ออนซ์": {
        "main_flavor": "milk",
        "profile": ["cold", "creamy", "light-sweet", "refreshing", "large-size"],
        "base": "milk",
    },
    "นมสดปั่น": {
        "main_flavor": "milk",
        "profile": ["frozen", "creamy", "sweet", "dessert-drink"],
        "base": "milk",
    },
    "นมสดปั่น 22 ออนซ์": {
        "main_flavor": "milk",
        "profile": ["frozen", "creamy", "sweet", "dessert-drink", "large-size"],
        "base": "milk",
    },
    "นมสดน้ำผึ้งเย็น": {
        "main_flavor": "honey",
        "profile": ["cold", "creamy", "sweet", "refreshing"],
        "base": "milk",
    },

    "มะพร้าวนมสดปั่น": {
        "main_flavor": "coconut",
        "profile": ["frozen", "creamy", "tropical", "dessert-drink", "refreshing"],
        "base": "milk",
    },

    # fruit
    "น้ำส้มเย็น": {
        "main_flavor": "orange",
        "profile": ["cold", "refreshing", "fruit", "thirst-quencher", "kids-friendly"],
        "base": "fruit_juice",
    },
    "น้ำส้มเสาวรสเย็น": {
        "main_flavor": "orange-passionfruit",
        "profile": ["cold", "refreshing", "tropical", "slightly-sour", "summer"],
        "base": "fruit_juice",
    },

    "เวรีมิกซ์เบอร์รีปั่น": {
        "main_flavor": "mixed-berry",
        "profile": ["frozen", "fruity", "refreshing", "sour-sweet"],
        "base": "fruit_juice",
    },
    "เวรีมิกซ์เบอร์รีโยเกิร์ตปั่น": {
        "main_flavor": "mixed-berry-yogurt",
        "profile": ["frozen", "fruity", "refreshing", "sour-sweet", "creamy"],
        "base": "fruit_juice",
    },
    "เวรีสตรอว์เบอร์รีปั่น": {
        "main_flavor": "strawberry",
        "profile": ["frozen", "fruity", "sweet", "refreshing"],
        "base": "fruit_juice",
    },
    "เวรีสตรอว์เบอร์รีโยเกิร์ตปั่น": {
        "main_flavor": "strawberry-yogurt",
        "profile": ["frozen", "fruity", "refreshing", "creamy", "sour-sweet"],
        "base": "fruit_juice",
    },

    # pang yen: iced dessert with bread topping
    "ปังเย็นเบิลช็อก": {
        "main_flavor": "double-chocolate",
        "profile": [
            "frozen", "dessert", "very-sweet", "bread-topping",
            "indulgent", "kids-friendly", "heavy"
        ],
        "base": "dessert",
    },
    "ปังเย็นน้ำแดง": {
        "main_flavor": "sala",
        "profile": [
            "frozen", "dessert", "sweet", "bread-topping",
            "fragrant", "thai-palate", "kids-friendly"
        ],
        "base": "dessert",
    },
    "ปังเย็นนมชมพู": {
        "main_flavor": "sala-milk",
        "profile": [
            "frozen", "dessert", "creamy", "sweet", "bread-topping",
            "fragrant", "thai-palate"
        ],
        "base": "dessert",
    },
    "ปังนมสดภูเขาไฟ": {
        "main_flavor": "milk",
        "profile": [
            "frozen", "dessert", "creamy", "bread-topping",
            "instagrammable", "indulgent"
        ],
        "base": "dessert",
    },
    "ปังเย็นชาไทย": {
        "main_flavor": "thai tea",
        "profile": [
            "frozen", "dessert", "creamy", "sweet", "bread-topping",
            "thai-palate"
        ],
        "base": "dessert",
    },

    # mixes
    "มัทฉะสตรอว์เบอร์รี": {
        "main_flavor": "matcha-strawberry",
        "profile": ["cold", "tea-based", "fruity", "sweet", "instagrammable", "refreshing"],
        "base": "tea",
    },
}

"""Sample Campsites: bundled demo listings for seeding an empty directory.

Invariants:
    - Records are flat snake_case dicts that pass CampsiteCreate validation
    - name_ja is unique within the bundle (used as the upsert key)
    - Facility/activity values are canonical keys, never free-text labels
"""

SAMPLE_CAMPSITES: tuple[dict, ...] = (
    {
        "name_ja": "高尾の森わくわくビレッジ",
        "name_en": "Takao Forest Wakuwaku Village",
        "address_ja": "東京都八王子市川町55",
        "address_en": "55 Kawamachi, Hachioji, Tokyo",
        "lat": 35.6328,
        "lng": 139.2644,
        "phone": "042-691-1166",
        "website": "https://www.wakuwaku-village.com/",
        "price": "¥2,000-¥4,000/泊",
        "price_min": 2000,
        "price_max": 4000,
        "facilities": ["toilet", "shower", "kitchen", "bbq", "parking", "wifi"],
        "activities": ["hiking", "bbq", "stargazing", "photography"],
        "nearest_station_ja": "JR高尾駅",
        "nearest_station_en": "JR Takao Station",
        "access_time_ja": "バス15分",
        "access_time_en": "15 min by bus",
        "description_ja": "高尾山の麓にある自然豊かなキャンプ場。BBQやハイキングを楽しめ、星空観察にも最適です。",
        "description_en": "A nature-rich campsite at the foot of Mt. Takao. Perfect for BBQ, hiking, and stargazing.",
        "reservation_url": "https://www.wakuwaku-village.com/reservation",
        "check_in_time": "14:00",
        "check_out_time": "11:00",
        "cancellation_policy_ja": "キャンセル料：利用日の7日前から30%、3日前から50%、当日100%",
        "cancellation_policy_en": "Cancellation fee: 30% from 7 days before, 50% from 3 days before, 100% on the day",
        "images": [
            "https://images.unsplash.com/photo-1504851149312-7a075b496cc7?w=800",
            "https://images.unsplash.com/photo-1478131143081-80f7f84ca84d?w=800",
        ],
    },
    {
        "name_ja": "奥多摩湖畔キャンプ場",
        "name_en": "Lake Okutama Campsite",
        "address_ja": "東京都西多摩郡奥多摩町原5",
        "address_en": "5 Hara, Okutama, Nishitama, Tokyo",
        "lat": 35.7891,
        "lng": 139.0234,
        "phone": "0428-86-2556",
        "website": "https://okutama-camp.com/",
        "price": "¥1,500-¥3,500/泊",
        "price_min": 1500,
        "price_max": 3500,
        "facilities": ["toilet", "kitchen", "bbq", "parking", "rental"],
        "activities": ["fishing", "canoe", "hiking", "river", "photography"],
        "nearest_station_ja": "JR奥多摩駅",
        "nearest_station_en": "JR Okutama Station",
        "access_time_ja": "バス20分",
        "access_time_en": "20 min by bus",
        "description_ja": "奥多摩湖の美しい景色を楽しめるキャンプ場。釣りやカヌーなどの水上アクティビティが充実しています。",
        "description_en": "Enjoy the beautiful scenery of Lake Okutama. Rich in water activities such as fishing and canoeing.",
        "reservation_url": "https://okutama-camp.com/booking",
        "check_in_time": "13:00",
        "check_out_time": "10:00",
        "cancellation_policy_ja": "キャンセル料：利用日の3日前から50%、当日100%",
        "cancellation_policy_en": "Cancellation fee: 50% from 3 days before, 100% on the day",
        "images": [
            "https://images.unsplash.com/photo-1441974231531-c6227db76b6e?w=800",
        ],
    },
    {
        "name_ja": "相模湖プレジャーフォレスト",
        "name_en": "Sagamiko Pleasure Forest",
        "address_ja": "神奈川県相模原市緑区若柳1634",
        "address_en": "1634 Wakayanagi, Midori-ku, Sagamihara, Kanagawa",
        "lat": 35.6045,
        "lng": 139.2511,
        "phone": "042-685-1111",
        "website": "https://www.sagamiko-resort.jp/",
        "price": "¥3,000-¥6,000/泊",
        "price_min": 3000,
        "price_max": 6000,
        "facilities": ["toilet", "shower", "kitchen", "bbq", "parking", "wifi", "shop"],
        "activities": ["bbq", "fishing", "boating", "cycling", "hiking"],
        "nearest_station_ja": "JR相模湖駅",
        "nearest_station_en": "JR Sagamiko Station",
        "access_time_ja": "バス8分",
        "access_time_en": "8 min by bus",
        "description_ja": "相模湖畔の大型リゾート施設内にあるキャンプ場。遊園地も併設しており、家族連れに人気です。",
        "description_en": "A campsite within a large resort facility by Lake Sagami. Popular with families as it also has an amusement park.",
        "reservation_url": "https://www.sagamiko-resort.jp/camp/reservation",
        "check_in_time": "15:00",
        "check_out_time": "10:00",
        "images": [],
    },
    {
        "name_ja": "富士五湖キャンプ場",
        "name_en": "Fuji Five Lakes Campsite",
        "address_ja": "山梨県南都留郡富士河口湖町船津1",
        "address_en": "1 Funatsu, Fujikawaguchiko, Minamitsuru, Yamanashi",
        "lat": 35.5089,
        "lng": 138.7628,
        "phone": "0555-72-1331",
        "website": "https://fujigoko-camp.com/",
        "price": "¥2,500-¥5,000/泊",
        "price_min": 2500,
        "price_max": 5000,
        "facilities": ["toilet", "shower", "kitchen", "bbq", "parking", "wifi", "hot_spring"],
        "activities": ["hiking", "fishing", "photography", "cycling", "stargazing", "hotspring"],
        "nearest_station_ja": "JR河口湖駅",
        "nearest_station_en": "JR Kawaguchiko Station",
        "access_time_ja": "バス10分",
        "access_time_en": "10 min by bus",
        "description_ja": "富士山の絶景を望める湖畔のキャンプ場。温泉施設もあり、リラックスできる環境です。",
        "description_en": "Lakeside campsite with spectacular views of Mt. Fuji. Hot spring facilities are also available for relaxation.",
        "reservation_url": "https://fujigoko-camp.com/reserve",
        "check_in_time": "14:00",
        "check_out_time": "11:00",
        "images": [],
    },
)

from types import MappingProxyType
from typing import List, Optional

# Static reference data shared read-only by every normalization call.

_COUNTRIES = {
    "AD": "Andorra", "AE": "United Arab Emirates", "AF": "Afghanistan",
    "AG": "Antigua and Barbuda", "AI": "Anguilla", "AL": "Albania", "AM": "Armenia",
    "AO": "Angola", "AQ": "Antarctica", "AR": "Argentina", "AS": "American Samoa",
    "AT": "Austria", "AU": "Australia", "AW": "Aruba", "AX": "Aland Islands",
    "AZ": "Azerbaijan", "BA": "Bosnia and Herzegovina", "BB": "Barbados",
    "BD": "Bangladesh", "BE": "Belgium", "BF": "Burkina Faso", "BG": "Bulgaria",
    "BH": "Bahrain", "BI": "Burundi", "BJ": "Benin", "BL": "Saint Barthelemy",
    "BM": "Bermuda", "BN": "Brunei", "BO": "Bolivia", "BQ": "Caribbean Netherlands",
    "BR": "Brazil", "BS": "Bahamas", "BT": "Bhutan", "BW": "Botswana", "BY": "Belarus",
    "BZ": "Belize", "CA": "Canada", "CD": "DR Congo", "CF": "Central African Republic",
    "CG": "Republic of the Congo", "CH": "Switzerland", "CI": "Ivory Coast",
    "CK": "Cook Islands", "CL": "Chile", "CM": "Cameroon", "CN": "China", "CO": "Colombia",
    "CR": "Costa Rica", "CU": "Cuba", "CV": "Cape Verde", "CW": "Curacao", "CY": "Cyprus",
    "CZ": "Czech Republic", "DE": "Germany", "DJ": "Djibouti", "DK": "Denmark",
    "DM": "Dominica", "DO": "Dominican Republic", "DZ": "Algeria", "EC": "Ecuador",
    "EE": "Estonia", "EG": "Egypt", "EH": "Western Sahara", "ER": "Eritrea", "ES": "Spain",
    "ET": "Ethiopia", "FI": "Finland", "FJ": "Fiji", "FK": "Falkland Islands",
    "FM": "Micronesia", "FO": "Faroe Islands", "FR": "France", "GA": "Gabon",
    "GD": "Grenada", "GE": "Georgia", "GF": "French Guiana", "GG": "Guernsey",
    "GH": "Ghana", "GI": "Gibraltar", "GL": "Greenland", "GM": "Gambia", "GN": "Guinea",
    "GP": "Guadeloupe", "GQ": "Equatorial Guinea", "GR": "Greece", "GT": "Guatemala",
    "GU": "Guam", "GW": "Guinea-Bissau", "GY": "Guyana", "HK": "Hong Kong",
    "HN": "Honduras", "HR": "Croatia", "HT": "Haiti", "HU": "Hungary", "ID": "Indonesia",
    "IE": "Ireland", "IL": "Israel", "IM": "Isle of Man", "IN": "India", "IQ": "Iraq",
    "IR": "Iran", "IS": "Iceland", "IT": "Italy", "JE": "Jersey", "JM": "Jamaica",
    "JO": "Jordan", "JP": "Japan", "KE": "Kenya", "KG": "Kyrgyzstan", "KH": "Cambodia",
    "KI": "Kiribati", "KM": "Comoros", "KN": "Saint Kitts and Nevis", "KP": "North Korea",
    "KR": "South Korea", "KW": "Kuwait", "KY": "Cayman Islands", "KZ": "Kazakhstan",
    "LA": "Laos", "LB": "Lebanon", "LC": "Saint Lucia", "LI": "Liechtenstein",
    "LK": "Sri Lanka", "LR": "Liberia", "LS": "Lesotho", "LT": "Lithuania",
    "LU": "Luxembourg", "LV": "Latvia", "LY": "Libya", "MA": "Morocco", "MC": "Monaco",
    "MD": "Moldova", "ME": "Montenegro", "MF": "Saint Martin", "MG": "Madagascar",
    "MH": "Marshall Islands", "MK": "North Macedonia", "ML": "Mali", "MM": "Myanmar",
    "MN": "Mongolia", "MO": "Macao", "MP": "Northern Mariana Islands", "MQ": "Martinique",
    "MR": "Mauritania", "MS": "Montserrat", "MT": "Malta", "MU": "Mauritius",
    "MV": "Maldives", "MW": "Malawi", "MX": "Mexico", "MY": "Malaysia", "MZ": "Mozambique",
    "NA": "Namibia", "NC": "New Caledonia", "NE": "Niger", "NG": "Nigeria",
    "NI": "Nicaragua", "NL": "Netherlands", "NO": "Norway", "NP": "Nepal", "NR": "Nauru",
    "NU": "Niue", "NZ": "New Zealand", "OM": "Oman", "PA": "Panama", "PE": "Peru",
    "PF": "French Polynesia", "PG": "Papua New Guinea", "PH": "Philippines",
    "PK": "Pakistan", "PL": "Poland", "PM": "Saint Pierre and Miquelon", "PR": "Puerto Rico",
    "PS": "Palestine", "PT": "Portugal", "PW": "Palau", "PY": "Paraguay", "QA": "Qatar",
    "RE": "Reunion", "RO": "Romania", "RS": "Serbia", "RU": "Russia", "RW": "Rwanda",
    "SA": "Saudi Arabia", "SB": "Solomon Islands", "SC": "Seychelles", "SD": "Sudan",
    "SE": "Sweden", "SG": "Singapore", "SH": "Saint Helena", "SI": "Slovenia",
    "SK": "Slovakia", "SL": "Sierra Leone", "SM": "San Marino", "SN": "Senegal",
    "SO": "Somalia", "SR": "Suriname", "SS": "South Sudan", "ST": "Sao Tome and Principe",
    "SV": "El Salvador", "SX": "Sint Maarten", "SY": "Syria", "SZ": "Eswatini",
    "TC": "Turks and Caicos Islands", "TD": "Chad", "TG": "Togo", "TH": "Thailand",
    "TJ": "Tajikistan", "TL": "Timor-Leste", "TM": "Turkmenistan", "TN": "Tunisia",
    "TO": "Tonga", "TR": "Turkey", "TT": "Trinidad and Tobago", "TV": "Tuvalu",
    "TW": "Taiwan", "TZ": "Tanzania", "UA": "Ukraine", "UG": "Uganda", "UK": "United Kingdom",
    "US": "United States", "UY": "Uruguay", "UZ": "Uzbekistan", "VA": "Vatican City",
    "VC": "Saint Vincent and the Grenadines", "VE": "Venezuela",
    "VG": "British Virgin Islands", "VI": "U.S. Virgin Islands", "VN": "Vietnam",
    "VU": "Vanuatu", "WF": "Wallis and Futuna", "WS": "Samoa", "XK": "Kosovo",
    "YE": "Yemen", "YT": "Mayotte", "ZA": "South Africa", "ZM": "Zambia", "ZW": "Zimbabwe",
}

_REGIONS = {
    "ARAB": ("AE", "BH", "DJ", "DZ", "EG", "IQ", "JO", "KM", "KW", "LB", "LY", "MA", "MR",
             "OM", "PS", "QA", "SA", "SD", "SO", "SY", "TN", "YE"),
    "BALKAN": ("AL", "BA", "BG", "GR", "HR", "ME", "MK", "RO", "RS", "SI", "XK"),
    "CARIB": ("AG", "AI", "AW", "BB", "BL", "BQ", "BS", "CU", "CW", "DM", "DO", "GD", "GP",
              "HT", "JM", "KN", "KY", "LC", "MF", "MQ", "MS", "PR", "SX", "TC", "TT", "VC",
              "VG", "VI"),
    "CIS": ("AM", "AZ", "BY", "KG", "KZ", "MD", "RU", "TJ", "UZ"),
    "EU": ("AT", "BE", "BG", "CY", "CZ", "DE", "DK", "EE", "ES", "FI", "FR", "GR", "HR",
           "HU", "IE", "IT", "LT", "LU", "LV", "MT", "NL", "PL", "PT", "RO", "SE", "SI", "SK"),
    "LATAM": ("AR", "BO", "BR", "CL", "CO", "CR", "CU", "DO", "EC", "GT", "HN", "MX", "NI",
              "PA", "PE", "PR", "PY", "SV", "UY", "VE"),
    "MENA": ("AE", "BH", "DZ", "EG", "IL", "IQ", "IR", "JO", "KW", "LB", "LY", "MA", "OM",
             "PS", "QA", "SA", "SY", "TN", "TR", "YE"),
    "NORD": ("DK", "FI", "FO", "GL", "IS", "NO", "SE"),
    "SEA": ("BN", "ID", "KH", "LA", "MM", "MY", "PH", "SG", "TH", "TL", "VN"),
}

# name, ISO 639-3, ISO 639-1
_LANGUAGES = (
    ("Afrikaans", "afr", "af"), ("Albanian", "sqi", "sq"), ("Amharic", "amh", "am"),
    ("Arabic", "ara", "ar"), ("Armenian", "hye", "hy"), ("Azerbaijani", "aze", "az"),
    ("Basque", "eus", "eu"), ("Belarusian", "bel", "be"), ("Bengali", "ben", "bn"),
    ("Bosnian", "bos", "bs"), ("Bulgarian", "bul", "bg"), ("Burmese", "mya", "my"),
    ("Catalan", "cat", "ca"), ("Chinese", "zho", "zh"), ("Croatian", "hrv", "hr"),
    ("Czech", "ces", "cs"), ("Danish", "dan", "da"), ("Dutch", "nld", "nl"),
    ("English", "eng", "en"), ("Estonian", "est", "et"), ("Faroese", "fao", "fo"),
    ("Filipino", "fil", ""), ("Finnish", "fin", "fi"), ("French", "fra", "fr"),
    ("Galician", "glg", "gl"), ("Georgian", "kat", "ka"), ("German", "deu", "de"),
    ("Greek", "ell", "el"), ("Gujarati", "guj", "gu"), ("Haitian", "hat", "ht"),
    ("Hausa", "hau", "ha"), ("Hebrew", "heb", "he"), ("Hindi", "hin", "hi"),
    ("Hungarian", "hun", "hu"), ("Icelandic", "isl", "is"), ("Indonesian", "ind", "id"),
    ("Irish", "gle", "ga"), ("Italian", "ita", "it"), ("Japanese", "jpn", "ja"),
    ("Kannada", "kan", "kn"), ("Kazakh", "kaz", "kk"), ("Khmer", "khm", "km"),
    ("Korean", "kor", "ko"), ("Kurdish", "kur", "ku"), ("Kyrgyz", "kir", "ky"),
    ("Lao", "lao", "lo"), ("Latvian", "lav", "lv"), ("Lithuanian", "lit", "lt"),
    ("Luxembourgish", "ltz", "lb"), ("Macedonian", "mkd", "mk"), ("Malay", "msa", "ms"),
    ("Malayalam", "mal", "ml"), ("Maltese", "mlt", "mt"), ("Marathi", "mar", "mr"),
    ("Mongolian", "mon", "mn"), ("Nepali", "nep", "ne"), ("Norwegian", "nor", "no"),
    ("Pashto", "pus", "ps"), ("Persian", "fas", "fa"), ("Polish", "pol", "pl"),
    ("Portuguese", "por", "pt"), ("Punjabi", "pan", "pa"), ("Romanian", "ron", "ro"),
    ("Russian", "rus", "ru"), ("Serbian", "srp", "sr"), ("Sinhala", "sin", "si"),
    ("Slovak", "slk", "sk"), ("Slovenian", "slv", "sl"), ("Somali", "som", "so"),
    ("Spanish", "spa", "es"), ("Swahili", "swa", "sw"), ("Swedish", "swe", "sv"),
    ("Tagalog", "tgl", "tl"), ("Tajik", "tgk", "tg"), ("Tamil", "tam", "ta"),
    ("Telugu", "tel", "te"), ("Thai", "tha", "th"), ("Turkish", "tur", "tr"),
    ("Turkmen", "tuk", "tk"), ("Ukrainian", "ukr", "uk"), ("Urdu", "urd", "ur"),
    ("Uzbek", "uzb", "uz"), ("Vietnamese", "vie", "vi"), ("Welsh", "cym", "cy"),
    ("Yoruba", "yor", "yo"), ("Zulu", "zul", "zu"),
)

_CATEGORIES = {
    "auto": "Auto", "animation": "Animation", "business": "Business",
    "classic": "Classic", "comedy": "Comedy", "cooking": "Cooking",
    "culture": "Culture", "documentary": "Documentary", "education": "Education",
    "entertainment": "Entertainment", "family": "Family", "general": "General",
    "kids": "Kids", "legislative": "Legislative", "lifestyle": "Lifestyle",
    "local": "Local", "movies": "Movies", "music": "Music", "news": "News",
    "outdoor": "Outdoor", "relax": "Relax", "religious": "Religious",
    "series": "Series", "science": "Science", "shop": "Shop", "sports": "Sports",
    "travel": "Travel", "weather": "Weather", "xxx": "XXX",
}

COUNTRIES = MappingProxyType(_COUNTRIES)
REGIONS = MappingProxyType(_REGIONS)
CATEGORIES = MappingProxyType(_CATEGORIES)
LANGUAGE_CODES = MappingProxyType({name.lower(): code for name, code, _ in _LANGUAGES})
LANGUAGE_NAMES = MappingProxyType({code: name for name, code, _ in _LANGUAGES})
_SHORT_LANGUAGE_CODES = MappingProxyType({short: code for _, code, short in _LANGUAGES if short})


def code2name(code: str) -> Optional[str]:
    if not code:
        return None
    return COUNTRIES.get(code.strip().upper())


def region2codes(region: str) -> List[str]:
    if not region:
        return []
    return list(REGIONS.get(region.strip().upper(), ()))


def language2code(name: str) -> Optional[str]:
    if not name:
        return None
    return LANGUAGE_CODES.get(name.strip().lower())


def code2language(code: str) -> Optional[str]:
    """Accepts both ISO 639-3 and ISO 639-1 codes."""
    if not code:
        return None
    code = code.strip().lower()
    code = _SHORT_LANGUAGE_CODES.get(code, code)
    return LANGUAGE_NAMES.get(code)


def category_name(group_id: str) -> Optional[str]:
    if not group_id:
        return None
    return CATEGORIES.get(group_id.strip().lower())

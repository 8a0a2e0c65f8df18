# newsdesk/ai_pipeline/feed_config.py
"""
RSS Feed Configuration for Newsdesk
National Indian outlets plus the keyword tables used to categorise articles
"""

# Configuration Constants
FEED_TIMEOUT_SECONDS = 10
MAX_ITEMS_PER_FEED = 20
MAX_CATEGORIES = 3
MIN_KEYWORD_MATCHES = 2
STRONG_KEYWORD_LENGTH = 10
BREAKING_WINDOW_MINUTES = 15
SUMMARY_MAX_SENTENCES = 3
SUMMARY_MIN_SENTENCE_LENGTH = 30
POSITIVE_THRESHOLD = 1
NEGATIVE_THRESHOLD = -1

# Reserved region code meaning "no region filter"
ALL_REGIONS = "all"
ALL_CATEGORIES = "all"

NATIONAL_FEEDS = [
    # Major National Newspapers - General/Politics
    {"name": "The Hindu - India", "url": "https://www.thehindu.com/news/national/feeder/default.rss", "category": "politics"},
    {"name": "The Hindu - World", "url": "https://www.thehindu.com/news/international/feeder/default.rss", "category": "politics"},
    {"name": "Indian Express - India", "url": "https://indianexpress.com/section/india/feed/", "category": "politics"},
    {"name": "Indian Express - World", "url": "https://indianexpress.com/section/world/feed/", "category": "politics"},
    {"name": "Times of India - India", "url": "https://timesofindia.indiatimes.com/rssfeedstopstories.cms", "category": "politics"},
    {"name": "Times of India - World", "url": "https://timesofindia.indiatimes.com/rssfeeds/296589292.cms", "category": "politics"},
    {"name": "Hindustan Times - India", "url": "https://www.hindustantimes.com/feeds/rss/india-news/rssfeed.xml", "category": "politics"},
    {"name": "Hindustan Times - World", "url": "https://www.hindustantimes.com/feeds/rss/world-news/rssfeed.xml", "category": "politics"},

    # News Agencies
    {"name": "PTI News", "url": "https://www.ptinews.com/rss/national.xml", "category": "politics"},
    {"name": "ANI News", "url": "https://www.aninews.in/rss/", "category": "politics"},

    # TV News Channels
    {"name": "NDTV - India", "url": "https://feeds.feedburner.com/ndtvnews-india-news", "category": "politics"},
    {"name": "NDTV - World", "url": "https://feeds.feedburner.com/ndtvnews-world-news", "category": "politics"},
    {"name": "CNN News18", "url": "https://www.news18.com/rss/india.xml", "category": "politics"},
    {"name": "India Today", "url": "https://www.indiatoday.in/rss/1206514", "category": "politics"},
    {"name": "Republic World", "url": "https://www.republicworld.com/feeds/india-news.xml", "category": "politics"},

    # Business & Economy
    {"name": "Economic Times", "url": "https://economictimes.indiatimes.com/rssfeedsdefault.cms", "category": "economics"},
    {"name": "Business Standard", "url": "https://www.business-standard.com/rss/home_page_top_stories.rss", "category": "economics"},
    {"name": "Mint", "url": "https://www.livemint.com/rss/news", "category": "economics"},

    # Independent & Hindi
    {"name": "The Wire", "url": "https://thewire.in/feed", "category": "politics"},
    {"name": "Scroll.in", "url": "https://scroll.in/feed", "category": "politics"},
    {"name": "News18 Hindi", "url": "https://hindi.news18.com/rss/india.xml", "category": "politics"},
    {"name": "Aaj Tak", "url": "https://www.aajtak.in/rss/india.xml", "category": "politics"},

    # Sports
    {"name": "Times of India Sports", "url": "https://timesofindia.indiatimes.com/rssfeeds/4719148.cms", "category": "sports"},
    {"name": "Indian Express Sports", "url": "https://indianexpress.com/section/sports/feed/", "category": "sports"},

    # Technology
    {"name": "Times of India Tech", "url": "https://timesofindia.indiatimes.com/rssfeeds/66949542.cms", "category": "tech"},
    {"name": "Indian Express Tech", "url": "https://indianexpress.com/section/technology/feed/", "category": "tech"},
]

CATEGORY_KEYWORDS = {
    "sports": [
        # Games
        "cricket", "football", "soccer", "hockey", "tennis", "badminton", "kabaddi", "wrestling",
        "athletics", "boxing", "basketball", "volleyball", "table tennis", "chess", "golf",
        "swimming", "cycling",

        # Competitions
        "olympics", "olympic", "championship", "tournament", "match", "game", "world cup", "ipl",
        "premier league", "league", "ipl match", "cricket match", "football match", "sports event",
        "champion", "medal", "trophy", "cup",

        # People
        "player", "team", "score", "athlete", "coach", "cricketer", "footballer", "hockey player",
        "tennis player", "badminton player", "wrestler",

        # Venues
        "stadium", "ground", "field", "court", "rink", "track", "pool", "gymnasium",

        # Administration
        "sports", "sport", "sports news", "sports minister", "sports authority",
        "sports federation", "sports association",
    ],

    "tech": [
        # Industry
        "technology", "tech", "startup", "tech company", "silicon valley", "startup funding",
        "venture capital", "ipo", "tech news", "innovation", "digital",

        # Software
        "app", "software", "application", "platform", "algorithm", "database", "server", "api",
        "framework", "library", "code", "coding", "programming", "developer", "engineer",
        "operating system", "windows", "linux", "android", "ios", "app store", "google play",

        # AI & data
        "artificial intelligence", "ai", "machine learning", "data", "big data", "analytics",
        "robotics", "automation", "blockchain", "cryptocurrency",

        # Devices & networks
        "gadgets", "gadget", "device", "smartphone", "computer", "laptop", "tablet", "smartwatch",
        "wearable", "mobile", "hardware", "processor", "chip", "semiconductor", "electronics",
        "internet", "web", "cloud", "network", "wifi", "broadband", "5g", "4g", "telecom",
        "communication", "iot", "internet of things", "vr", "virtual reality", "ar",
        "augmented reality", "metaverse",

        # Security
        "cybersecurity", "cyber security", "hacking", "malware", "virus", "firewall",
        "encryption", "privacy",
    ],

    "economics": [
        # Macro
        "economy", "economic", "economic growth", "gdp", "growth", "inflation", "recession",
        "development", "infrastructure", "industry", "manufacturing", "service sector",
        "monetary", "fiscal", "policy", "budget", "budget deficit", "fiscal deficit", "tax",

        # Markets
        "business", "market", "stock", "share", "stock market", "share market", "sensex",
        "nifty", "bse", "nse", "sebi", "trading", "broker", "mutual fund", "etf", "bond",
        "debenture", "equity", "debt", "portfolio", "dividend", "investment",

        # Corporate results
        "profit", "loss", "earnings", "revenue", "turnover", "balance sheet", "income statement",

        # Banking & money
        "finance", "financial", "banking", "reserve bank", "rbi", "interest rate", "repo rate",
        "bank rate", "crr", "slr", "liquidity", "credit", "loan", "mortgage", "emi",
        "credit card", "debit card", "payment", "transaction", "fintech", "digital banking",
        "mobile banking", "online banking", "net banking",

        # Trade & currency
        "trade", "commerce", "export", "import", "trade agreement", "fta", "wto", "world bank",
        "imf", "adb", "current account", "trade deficit", "surplus", "foreign exchange", "forex",
        "currency", "rupee", "dollar", "euro", "yen", "pound",

        # Real economy
        "agriculture", "farming", "crop", "yield", "production", "supply chain", "logistics",
    ],

    "politics": [
        # Government & legislature
        "government", "politics", "political", "politician", "minister", "parliament", "policy",
        "law", "bill", "opposition", "ruling", "democracy", "mla", "mp", "mps", "legislator",
        "assembly", "lok sabha", "rajya sabha", "vidhan sabha", "legislative", "legislation",
        "act", "ordinance", "notification", "gazette", "cabinet", "council of ministers",
        "prime minister", "pm", "chief minister", "cm", "governor", "president",
        "vice president", "speaker", "chairman", "leader", "secretary",

        # Parties & alliances
        "party", "bjp", "congress", "inc", "bsp", "sp", "aap", "tmc", "dmk", "aiadmk", "jdu",
        "rjd", "shiv sena", "ncp", "cpi", "cpim", "bjd", "ysrcp", "tdp", "jds",
        "political party", "coalition", "alliance", "nda", "upa", "mahagathbandhan", "front",
        "bloc", "faction",

        # Elections
        "election", "vote", "campaign", "election commission", "ec", "eci", "polling", "booth",
        "voter", "constituency", "ward", "manifesto",

        # Local government & administration
        "municipality", "corporation", "panchayat", "gram sabha", "local body",
        "urban local body", "rural development", "panchayati raj", "decentralization",
        "governance", "administration", "bureaucracy", "bureaucrat", "ias", "ips", "irs",
        "civil service", "public service", "policy making", "decision making", "reform",
        "scheme", "program", "initiative", "project",

        # Ideology & society
        "agenda", "ideology", "left", "right", "center", "liberal", "conservative",
        "nationalism", "secularism", "communalism", "caste", "religion", "minority", "majority",
        "reservation", "quota", "affirmative action", "social justice", "equality", "inequality",

        # Accountability & judiciary
        "corruption", "scam", "vigilance", "cbi", "ed", "income tax", "raid", "probe", "inquiry",
        "supreme court", "high court", "district court", "tribunal", "judiciary", "justice",
        "judge", "lawyer", "advocate", "bar council", "legal", "constitution",
        "fundamental rights", "directive principles", "federalism", "center-state relations",
        "autonomy", "special status", "article 370", "article 35a",

        # Security & foreign affairs
        "national security", "defense", "military", "army", "navy", "air force", "paramilitary",
        "border", "terrorism", "naxalism", "maoism", "insurgency", "militancy", "extremism",
        "foreign policy", "diplomacy", "international relations", "summit", "treaty",
        "agreement", "united nations", "un", "uno", "security council", "general assembly",
        "human rights",

        # Environment policy
        "climate change", "environment", "pollution", "global warming",
        "sustainable development", "sdg", "agenda 2030",
    ],

    "crime": [
        # General
        "crime", "criminal", "crime news", "criminal case", "police", "arrest", "arrested",
        "investigation", "police investigation", "accused", "suspect", "witness", "evidence",
        "forensic", "postmortem", "autopsy", "inquest",

        # Procedure
        "fir", "first information report", "complaint", "charge sheet", "chargesheet",
        "warrant", "summons", "bail", "bond", "surety", "judicial custody", "police custody",
        "magistrate", "court", "trial", "conviction", "sentence", "prison", "jail",
        "plaintiff", "defendant", "prosecution", "defense", "lawyer", "advocate",
        "public prosecutor", "pp", "sessions court", "district court", "high court",
        "supreme court", "apex court", "bench", "judgment", "verdict", "order", "decree",
        "appeal", "revision", "review", "petition", "plea", "application", "motion", "stay",
        "injunction", "interim order", "status quo",

        # Violent crime
        "murder", "murder case", "homicide", "manslaughter", "culpable homicide", "dowry death",
        "honor killing", "attempt to murder", "assault", "battery", "hurt", "grievous hurt",
        "wounding", "injury", "bodily harm", "lynching", "mob violence", "communal violence",
        "riot", "clash", "conflict", "dispute", "encounter", "fake encounter",
        "custodial death", "custodial violence", "police brutality",

        # Sexual offences & trafficking
        "rape", "sexual assault", "molestation", "harassment", "eve teasing", "stalking",
        "voyeurism", "kidnapping", "abduction", "trafficking", "human trafficking",
        "child trafficking", "organ trafficking",

        # Property crime
        "robbery", "dacoity", "burglary", "house breaking", "theft", "auto theft",
        "chain snatching", "pickpocketing", "shoplifting",

        # Fraud & financial crime
        "fraud", "scam", "cyber crime", "online fraud", "phishing", "hacking", "identity theft",
        "credit card fraud", "bank fraud", "insurance fraud", "tax evasion", "money laundering",
        "hawala", "black money", "benami", "shell company", "fake currency", "counterfeit",
        "forgery", "cheating", "breach of trust", "criminal breach of trust",
        "misappropriation", "embezzlement", "economic offence", "financial crime",
        "white collar crime", "corporate crime", "insider trading", "securities fraud",
        "market manipulation", "ponzi scheme", "chit fund", "pyramid scheme",

        # Corruption
        "corruption", "bribe", "bribery", "graft", "kickback", "vigilance", "anti-corruption",
        "cbi", "ed", "enforcement directorate", "sfio", "serious fraud investigation office",

        # Narcotics, liquor, gambling
        "narcotics", "drugs", "drug trafficking", "ndps",
        "narcotic drugs and psychotropic substances", "liquor", "alcohol", "prohibition",
        "excise", "bootlegging", "illicit liquor", "spurious liquor", "gambling", "betting",
        "lottery", "casino", "online gambling", "match fixing", "spot fixing",

        # Family & children
        "domestic violence", "dowry", "cruelty", "matrimonial dispute", "maintenance",
        "alimony", "child custody", "guardianship", "adoption", "juvenile", "minor", "child",
        "protection", "poco", "prevention of children from sexual offences", "child abuse",
        "child labor", "bonded labor",

        # Road
        "hit and run", "rash driving", "drunken driving", "drunk driving", "road accident",
        "traffic violation",

        # Weapons & terror
        "arms", "weapons", "firearms", "ammunition", "explosives", "bomb", "grenade",
        "terrorist", "terrorism", "terror", "extremist", "militant", "insurgent", "naxal",
        "maoist", "left wing extremism",

        # Organised crime
        "conspiracy", "abetment", "criminal conspiracy", "joint liability", "accomplice",
        "accessory", "principal offender", "kingpin", "mastermind", "organized crime", "gang",
        "gangster", "underworld", "don", "mafia", "syndicate", "cartel", "smuggling",

        # Environment & wildlife
        "wildlife crime", "poaching", "illegal hunting", "forest", "sanctuary", "national park",
        "environmental crime", "pollution", "illegal mining", "sand mafia", "land mafia",
        "water mafia",

        # Online & speech
        "cyberbullying", "trolling", "online harassment", "revenge porn", "deepfake", "morphing",
        "intellectual property", "copyright", "trademark", "patent", "piracy", "infringement",
        "fake news", "misinformation", "disinformation", "propaganda", "hate speech", "sedition",
    ],
}

# Broad title-only patterns used when keyword counting finds nothing
TITLE_FALLBACK_PATTERNS = {
    "sports": r"\b(cricket|football|match|player|team|sports?)\b",
    "tech": r"\b(tech|startup|app|software|ai|blockchain)\b",
    "economics": r"\b(economy|business|market|stock|finance)\b",
    "politics": r"\b(politics?|government|election|minister)\b",
    "crime": r"\b(crime|police|arrest|court|murder)\b",
}

"""
SongFinder Vibe Taxonomy
바이브 장르, 디스크립터 어휘, 바이브별 태그 신호 (정적 데이터)

새 바이브 추가 시:
  1. VIBE_GENRES, VIBE_META, VIBE_SIGNALS 세 곳에 모두 추가
  2. 디스크립터는 DESCRIPTORS 어휘 안에서만 선택
  3. 앱 시작 시 validate_taxonomy()가 누락을 잡아낸다
"""

from dataclasses import dataclass
from typing import Dict, Tuple


UNCLASSIFIED = "Unclassified (Vibe TBD)"

# =============================================================================
# 바이브 장르 (표시 순서)
# =============================================================================

VIBE_GENRES: Tuple[str, ...] = (
    "Star Fishing",
    "Velvet Haze",
    "Cloud Nine",
    "Golden Hour",
    "Festival Buzz",
    "Sunrise Drive",
    "Crowd Control",
    "Heat Check",
    "Low-Light Groovy",
    "Speakeasy",
    "Tumblr Core",
    "White Noise",
    "Soul Kitchen",
    "Honey Glow",
    "Saddle Up",
    "Fireplace Folk",
    "Vintage Warmth",
    "Sunday Morning",
    "Bar for Bar",
    "Soul Train",
    "Afterparty",
    "Mind Palace",
    "Color Theory",
    "Rhythm Therapy",
    "Club Catalyst",
    "Indie Wanderlust",
    "Garage Grunge",
    "Indie Sleaze",
    "Lo-Fi Nostalgia",
    "Feel The Bass",
    "Dad Rock",
    "Full Throttle",
    "Mosh Pit Magic",
    "Windows Down",
    "Hammock Mode",
    "Under A Palm Tree",
    "Rainy Day Replay",
    "Zen Garden",
    "Do Not Disturb",
    "Scenic Route",
    "Heart on Sleeve",
    UNCLASSIFIED,
    "Pulso",
    "Palmwine Nights",
    "Side B",
    "Pixelated Pop",
    "Electric Daydream",
    "In Sync",
)

VIBE_META: Dict[str, str] = {
    "Star Fishing": "Floating, cosmic, slightly untethered... transcendental and expansive. Headphones recommended.",
    "Velvet Haze": "Soft-focus indie with rounded edges... peaceful co-existence.",
    "Cloud Nine": "Light, effortless, buoyant... undeniably happy.",
    "Golden Hour": "Warm tones, gentle euphoria... romantic, cinematic, fleeting core-memory feeling.",
    "Festival Buzz": "Made to be felt in a crowd... the rush before the drop and the collective scream.",
    "Sunrise Drive": "Quiet momentum... calm but moving forward in early-morning light.",
    "Crowd Control": "Controlled chaos for packed rooms... house-leaning, groove-heavy, magnetic.",
    "Heat Check": "Hard, sharp, unapologetic... trap/rap that hits with precision.",
    "Low-Light Groovy": "Dim lights, slow movement... basslines lead, walking through the city at night.",
    "Speakeasy": "Jazz-rooted, smoky, intimate... velvet curtains, low ceilings, a little dangerous.",
    "Tumblr Core": "Emotionally online... 2am scrolling, soft sadness with sharp edges.",
    "White Noise": "Alt-emo textures... distant but intense, heavy atmosphere.",
    "Soul Kitchen": "Warm, intimate, human... family dinner energy, soulful and honest.",
    "Honey Glow": "Sweet country warmth... sincere, comforting, golden.",
    "Saddle Up": "Classic roots + pop-country ease... built for driving, dancing, singing along.",
    "Fireplace Folk": "Cozy indie folk... cold night, cards with friends, warmth filling the room.",
    "Vintage Warmth": "Time-worn folk/country... analog warmth, storytelling first.",
    "Sunday Morning": "Stillness with intention... coffee, open windows, quietly hopeful.",
    "Bar for Bar": "High-energy rap built around rhythm and presence... car speakers or party settings.",
    "Soul Train": "Pure groove and joy... classic soul/funk that lifts the room.",
    "Afterparty": "Low lights, late hours... chill rap + R&B, 3am conversations.",
    "Mind Palace": "Spacious and introspective... clean melodies, quiet clarity.",
    "Color Theory": "Rap that plays with contrast... bold, colorful, experimental but undeniable.",
    "Rhythm Therapy": "Movement as medicine... groove-forward, danceable, joyful.",
    "Club Catalyst": "Instant reaction music... undeniable bangers that flip the room.",
    "Indie Wanderlust": "Carefree exploration... classic indie movement and open air.",
    "Garage Grunge": "Raw early-2000s alternative... loud guitars, imperfect edges.",
    "Indie Sleaze": "Messy, stylish, chaotic... sticky floors, irony over sincerity.",
    "Lo-Fi Nostalgia": "Familiar, faded memories... warm throwbacks that comfort.",
    "Feel The Bass": "Physical intensity... heavy EDM, hood up, shades on, world off.",
    "Dad Rock": "Comfort classics... helping your dad clean the garage on a Saturday.",
    "Full Throttle": "Maximum energy... hard rock/metal built for speed and power.",
    "Mosh Pit Magic": "Chaotic joy... collision music for crowds.",
    "Windows Down": "Sun-soaked freedom... beach day drive home, golden and loud.",
    "Hammock Mode": "Peaceful contentment... warm breeze, nothing urgent.",
    "Under A Palm Tree": "Laid-back reggae grooves... shade, warmth, unbothered time.",
    "Rainy Day Replay": "Soft introspection... rain on windows, thoughts wandering.",
    "Zen Garden": "Focused calm... lo-fi / meditative concentration.",
    "Do Not Disturb": "Total immersion... nothing else but you and the music.",
    "Scenic Route": "Unrushed exploration... back roads, detours, path less traveled.",
    "Heart on Sleeve": "Big feelings... belting in the car like no one's watching.",
    UNCLASSIFIED: "No rules yet. Tracks that don't fit\u2014but still hit.",
    "Pulso": (
        "Latin rhythms at their most physical. Built on percussion, heat, and collective movement. "
        "Feels like packed rooms, late hours, and a pulse that travels through the crowd all at once."
    ),
    "Palmwine Nights": (
        "Soft glow and effortless rhythm. Afrobeats and Afro-pop that feel relaxed but alive\u2014"
        "melodic, warm, and social. Music for night air, slow movement, and conversations that "
        "drift as easily as the beat."
    ),
    "Side B": (
        "Emotional, loud, and unapologetically felt. Hooks you shout even when your voice cracks. "
        "Feels like being in the back seat, windows open, singing every word without caring who "
        "hears. Nostalgia, urgency, and release all at once."
    ),
    "Pixelated Pop": (
        "Hyper-digital and overstimulating in the best way. Bright melodies, warped vocals, and "
        "glitchy energy that feels online, chaotic, and playful. Music that moves fast, breaks "
        "rules, and never stays still for long."
    ),
    "Electric Daydream": (
        "Synths, movement, and a sense of wonder. Indie electronic that feels cinematic and light\u2014"
        "floating between late-night drives and glowing city lights."
    ),
    "In Sync": (
        "Polished K-pop where music, movement, and visuals are inseparable. Tight performances, "
        "addictive hooks, and the shared ritual of watching everything line up perfectly."
    ),
}

# =============================================================================
# 디스크립터 어휘
# =============================================================================

DESCRIPTORS: Tuple[str, ...] = (
    # 감정
    "euphoric", "melancholic", "bittersweet", "hopeful", "nostalgic",
    "yearning", "cathartic", "tender", "defiant", "wistful",
    "triumphant", "anxious", "peaceful", "rebellious", "romantic",
    "introspective", "playful", "somber", "uplifting", "haunting",

    # 시간 / 상황
    "late-night", "early-morning", "golden-hour", "midnight", "sunset",
    "rainy-day", "road-trip", "party-starter", "wind-down", "workout",
    "study-session", "coffee-shop", "bedroom", "festival", "commute",

    # 질감
    "shimmering", "gritty", "lush", "sparse", "layered",
    "crystalline", "fuzzy", "crisp", "warm", "cold",
    "raw", "polished", "lo-fi", "hi-fi", "organic",
    "synthetic", "acoustic", "electric", "hazy", "sharp",
    "smooth",

    # 에너지
    "driving", "floating", "pulsing", "swaying", "stomping",
    "gliding", "crashing", "building", "releasing", "simmering",
    "explosive", "gentle", "relentless", "hypnotic", "kinetic",

    # 분위기
    "dreamy", "ethereal", "cinematic", "intimate", "anthemic",
    "moody", "sunny", "dark", "bright", "smoky",
    "spacious", "claustrophobic", "expansive", "minimal", "maximal",

    # 장르 인접
    "indie-coded", "alt-leaning", "pop-adjacent", "underground",
    "mainstream-friendly", "cult-classic", "timeless", "futuristic", "retro",
    "experimental", "accessible", "niche", "crossover", "genre-fluid",

    # 반복 청취성
    "brain-scratch", "earworm", "repeatable", "grower", "instant-hit",
    "deep-cut", "crowd-pleaser", "hidden-gem", "sleeper", "anthem",

    # 프로덕션
    "bass-heavy", "treble-bright", "mid-focused", "sub-rattling",
    "vocal-forward", "instrumental-led", "beat-driven", "melody-first",
    "texture-rich", "groove-locked", "dynamic", "compressed", "breathing",

    # 문화 / 미학
    "city-nights", "countryside", "coastal", "urban", "suburban",
    "global", "local", "DIY", "authentic",
    "curated", "effortless", "intentional", "spontaneous", "crafted",
    "storytelling",
)

DESCRIPTOR_SET = frozenset(DESCRIPTORS)

FALLBACK_DESCRIPTORS: Tuple[str, ...] = ("brain-scratch", "repeatable", "late-night")

# =============================================================================
# 태그 그룹 (여러 바이브에서 재사용)
# =============================================================================

TRAP = ("trap", "drill", "dark trap", "hard trap", "grime")
RAP = ("rap", "hip hop")
RAP_ALT = ("alternative hip hop", "experimental hip hop", "art rap", "experimental rap", "abstract hip hop")
RAP_MELODIC = ("melodic rap", "melodic hip hop")

RNB = ("r&b", "alternative r&b", "contemporary r&b")
SOUL = ("neo soul", "soul", "classic soul")
SLOW_RNB = ("slow jam", "80s r&b", "quiet storm")

FUNK_CLASSIC = ("motown", "disco", "classic funk", "boogie")
FUNK_MODERN = ("nu disco", "future funk", "funky", "house funk")

HOUSE = ("house", "tech house", "deep house", "minimal house")
TECHNO = ("techno", "trance", "progressive house", "uplifting trance")
BASS = ("dubstep", "riddim", "brostep", "drum and bass", "bass music")
EDM = ("edm", "big room", "main stage", "electro house", "mainstage")
SYNTH = ("synth pop", "electropop", "indie electronic", "chillsynth", "future pop")

ROCK_CLASSIC = ("classic rock", "70s rock", "80s rock", "arena rock", "southern rock")
ROCK_ALT = ("alternative rock", "grunge", "post grunge", "garage rock", "noise pop")
METAL = ("hard rock", "heavy metal", "thrash", "speed metal", "death metal")
METAL_CORE = ("metalcore", "hardcore punk", "beatdown", "deathcore")

INDIE = ("indie rock", "indie pop")
INDIE_SLEAZE = ("indie sleaze", "electroclash", "bloghouse", "new rave", "dance punk")

EMO = ("emo", "midwest emo", "screamo")
EMO_HEAVY = ("alternative metal", "nu metal", "post hardcore", "shoegaze metal", "noise rock")
POP_PUNK = ("pop punk", "pop rock", "emo pop", "warped tour")

DREAM = ("dream pop", "shoegaze", "slowcore", "ethereal pop")
AMBIENT = ("space ambient", "soundscape", "drone", "dark ambient")
COSMIC = ("cosmic", "space", "astral", "celestial")

LOFI = ("lo fi", "chillwave", "bedroom pop", "lofi beats")

FOLK = ("indie folk", "folk", "chamber folk")
COUNTRY_CLASSIC = ("classic country", "outlaw country", "bluegrass", "honky tonk", "country rock")
COUNTRY_MOD = ("modern country", "country pop", "contemporary country")
AMERICANA = ("americana", "roots", "traditional folk", "old time", "folk blues")

JAZZ = ("jazz", "bebop", "swing", "jazz fusion", "bossa nova", "cool jazz")

LATIN_URBAN = ("reggaeton", "latin trap", "dembow", "perreo", "latin urban", "urbano")
LATIN_TRAD = ("salsa", "bachata", "cumbia", "merengue", "banda", "regional mexican", "corrido", "norteno", "vallenato")

AFRO = ("afrobeats", "afropop", "afrofusion", "afroswing")
AFRO_DANCE = ("amapiano", "highlife", "afro house")

REGGAE = ("reggae", "dub", "ska", "dancehall", "roots reggae")

KPOP = ("k pop", "korean pop", "korean")
JPOP = ("j pop", "japanese pop", "city pop")

HYPERPOP = ("hyperpop", "pc music", "glitch pop", "bubblegum bass", "nightcore", "digicore")
GLITCH = ("glitch", "breakcore", "idm", "wonky", "deconstructed club")

BALLAD = ("ballad", "power ballad", "big vocal", "diva", "belting")

HAPPY = ("happy", "feel good", "joyful", "upbeat")
SAD = ("sad", "melancholic", "heartbreak")
CHILL = ("chill", "relaxing", "mellow", "calm", "peaceful")
AGGRESSIVE = ("aggressive", "hard", "intense")

MORNING = ("early morning", "morning", "dawn", "sunrise")
NIGHT = ("late night", "midnight", "night")
SUMMER = ("summer", "beach", "coastal", "sunny", "vacation")
STUDY = ("study", "focus", "meditation", "concentration")
CINEMATIC = ("cinematic", "soundtrack", "score", "immersive", "headphones")
LIVE = ("live", "concert", "bootleg")
FESTIVAL = ("festival", "arena", "stadium")

# =============================================================================
# 바이브 신호
# =============================================================================
#   core:  구체적 태그, +3점
#   broad: 일반 태그, +1점
#   boost: 맥락/무드, +1.5점 (core 또는 broad가 하나 이상 맞을 때만)
#   anti:  맞지 않는 태그, -2점

CORE_W = 3.0
BROAD_W = 1.0
BOOST_W = 1.5
ANTI_W = -2.0


@dataclass(frozen=True)
class VibeSignal:
    core: Tuple[str, ...]
    descriptors: Tuple[str, ...]
    broad: Tuple[str, ...] = ()
    boost: Tuple[str, ...] = ()
    anti: Tuple[str, ...] = ()


VIBE_SIGNALS: Dict[str, VibeSignal] = {
    # ── Cosmic / Atmospheric ──
    "Star Fishing": VibeSignal(
        core=COSMIC + AMBIENT + ("space rock", "post rock"),
        broad=("ambient", "atmospheric", "ethereal"),
        boost=("transcendental", "expansive", "psychedelic"),
        anti=STUDY + ("chill", "relaxing"),
        descriptors=("ethereal", "expansive", "floating", "spacious", "shimmering", "cinematic", "hypnotic"),
    ),
    "Velvet Haze": VibeSignal(
        core=DREAM + ("slowdive", "cocteau twins"),
        broad=("indie", "dreamy"),
        boost=("hazy", "reverb", "lush"),
        anti=("metal", "aggressive", "trap", "drill"),
        descriptors=("dreamy", "hazy", "shimmering", "floating", "lush", "introspective"),
    ),
    "Mind Palace": VibeSignal(
        core=("art pop", "chamber pop", "indietronica", "art rock"),
        broad=("introspective", "experimental"),
        boost=("cerebral", "minimal", "clean"),
        anti=("party", "banger", "anthem", "mosh"),
        descriptors=("introspective", "spacious", "crafted", "cinematic", "layered", "crystalline"),
    ),

    # ── Happy / Warm / Cinematic ──
    "Cloud Nine": VibeSignal(
        core=HAPPY + ("bubblegum pop",),
        broad=("pop", "uplifting"),
        boost=("bright", "sunny", "dance"),
        anti=("dark", "sad", "melancholic", "aggressive"),
        descriptors=("uplifting", "bright", "euphoric", "sunny", "playful", "instant-hit"),
    ),
    "Golden Hour": VibeSignal(
        core=("golden hour", "sunset", "cinematic pop"),
        broad=("warm", "nostalgic", "cinematic"),
        boost=("romantic", "dreamy", "bittersweet"),
        anti=("aggressive", "hard", "dark", "trap"),
        descriptors=("golden-hour", "nostalgic", "cinematic", "warm", "bittersweet", "romantic"),
    ),
    "Sunday Morning": VibeSignal(
        core=("sunday morning", "coffee shop", "acoustic chill"),
        broad=("peaceful", "gentle") + MORNING,
        boost=("acoustic", "warm", "light"),
        anti=("aggressive", "loud", "metal", "trap", "party"),
        descriptors=("peaceful", "early-morning", "coffee-shop", "gentle", "warm", "hopeful"),
    ),

    # ── Festival / Crowd / Club ──
    "Festival Buzz": VibeSignal(
        core=FESTIVAL + ("big chorus",) + EDM,
        broad=("anthem", "edm"),
        boost=LIVE + ("crowd", "drop"),
        anti=("acoustic", "mellow", "lo fi", "folk"),
        descriptors=("anthemic", "crowd-pleaser", "explosive", "building", "festival", "euphoric"),
    ),
    "Crowd Control": VibeSignal(
        core=HOUSE,
        broad=("electronic", "club"),
        boost=("groove", "pulsing", "4 on the floor"),
        anti=("rock", "metal", "acoustic", "folk"),
        descriptors=("groove-locked", "pulsing", "kinetic", "late-night", "beat-driven", "hypnotic"),
    ),
    "Club Catalyst": VibeSignal(
        core=("banger", "throwback", "2000s party", "electro house"),
        broad=("edm", "dance", "party"),
        boost=("anthem", "crowd", "hype", "sing along", "main stage"),
        anti=("chill", "acoustic", "folk", "study"),
        descriptors=("crowd-pleaser", "instant-hit", "explosive", "anthem", "party-starter", "earworm"),
    ),
    "Feel The Bass": VibeSignal(
        core=BASS,
        broad=("bass", "electronic"),
        boost=("heavy", "sub", "wobble", "filthy"),
        anti=("acoustic", "folk", "jazz", "chill"),
        descriptors=("bass-heavy", "sub-rattling", "explosive", "kinetic", "gritty", "relentless"),
    ),
    "Rhythm Therapy": VibeSignal(
        core=FUNK_MODERN + ("dance pop",),
        broad=("dance", "funk", "electronic"),
        boost=("groove", "joyful", "movement"),
        anti=("sad", "dark", "aggressive", "metal"),
        descriptors=("groove-locked", "kinetic", "pulsing", "uplifting", "dynamic", "party-starter"),
    ),

    # ── Rap ──
    "Heat Check": VibeSignal(
        core=TRAP,
        broad=AGGRESSIVE,
        boost=("bass", "808", "dark"),
        anti=("melodic", "chill", "mellow", "acoustic"),
        descriptors=("bass-heavy", "dark", "sharp", "relentless", "explosive", "sub-rattling"),
    ),
    "Bar for Bar": VibeSignal(
        core=("party rap", "hype", "bounce", "crunk", "club rap"),
        broad=RAP,
        boost=("party", "energy", "bass", "car"),
        anti=("chill", "mellow", "acoustic", "sad"),
        descriptors=("beat-driven", "kinetic", "party-starter", "explosive", "bass-heavy", "crowd-pleaser"),
    ),
    "Afterparty": VibeSignal(
        core=RAP_MELODIC + ("alternative r&b", "moody r&b"),
        broad=("r&b", "chill"),
        boost=NIGHT + ("moody", "3am"),
        anti=MORNING + ("happy", "upbeat") + AGGRESSIVE,
        descriptors=("late-night", "moody", "intimate", "romantic", "hazy", "smooth"),
    ),
    "Color Theory": VibeSignal(
        core=RAP_ALT,
        broad=("hip hop",),
        boost=("experimental", "creative", "unconventional"),
        anti=("mainstream", "country", "folk"),
        descriptors=("experimental", "dynamic", "playful", "crossover", "genre-fluid", "futuristic"),
    ),

    # ── R&B / Soul / Groove ──
    "Soul Kitchen": VibeSignal(
        core=SOUL + ("neo soul",),
        broad=("r&b", "warm"),
        boost=("vocal", "tender", "intimate", "gospel"),
        anti=("trap", "drill", "electronic", "metal"),
        descriptors=("warm", "tender", "vocal-forward", "intimate", "organic", "simmering"),
    ),
    "Low-Light Groovy": VibeSignal(
        core=SLOW_RNB + ("quiet storm",),
        broad=("funk", "groove", "r&b"),
        boost=NIGHT + ("city", "bassline"),
        anti=MORNING + ("acoustic", "rock", "metal"),
        descriptors=("groove-locked", "warm", "swaying", "late-night", "lush", "moody"),
    ),
    "Soul Train": VibeSignal(
        core=FUNK_CLASSIC + ("classic soul",),
        broad=("funk", "retro", "70s"),
        boost=("dance", "groove", "party"),
        anti=("metal", "punk", "sad", "melancholic"),
        descriptors=("groove-locked", "retro", "party-starter", "warm", "uplifting", "timeless"),
    ),
    "Speakeasy": VibeSignal(
        core=JAZZ + ("lounge",),
        broad=("smooth jazz",),
        boost=("smoky", "intimate", "cocktail"),
        anti=("electronic", "metal", "punk", "trap"),
        descriptors=("smoky", "intimate", "organic", "instrumental-led", "timeless", "warm"),
    ),

    # ── Emo / Alt / Dark ──
    "Tumblr Core": VibeSignal(
        core=EMO + ("emo pop", "sad indie"),
        broad=("sad", "indie"),
        boost=("emotional", "bedroom", "vulnerable"),
        anti=("happy", "upbeat", "country", "jazz"),
        descriptors=("cathartic", "yearning", "bittersweet", "raw", "introspective", "moody"),
    ),
    "White Noise": VibeSignal(
        core=EMO_HEAVY + ("grungegaze",),
        broad=("heavy", "distorted"),
        boost=("dark", "atmospheric", "wall of sound"),
        anti=("pop", "happy", "acoustic", "jazz"),
        descriptors=("haunting", "dark", "gritty", "layered", "relentless", "claustrophobic"),
    ),

    # ── Indie / Alt ──
    "Indie Wanderlust": VibeSignal(
        core=INDIE + ("indie anthem",),
        broad=("indie", "alternative"),
        boost=("road trip", "open road", "carefree"),
        anti=("metal", "trap", "electronic", "edm"),
        descriptors=("indie-coded", "driving", "uplifting", "crafted", "road-trip", "effortless"),
    ),
    "Garage Grunge": VibeSignal(
        core=ROCK_ALT,
        broad=("punk", "alternative"),
        boost=("raw", "distorted", "loud", "2000s"),
        anti=("chill", "r&b", "jazz", "electronic"),
        descriptors=("raw", "gritty", "rebellious", "kinetic", "defiant", "driving"),
    ),
    "Indie Sleaze": VibeSignal(
        core=INDIE_SLEAZE,
        broad=("indie", "party"),
        boost=("messy", "chaotic", "ironic", "2000s"),
        anti=("folk", "country", "acoustic", "chill"),
        descriptors=("retro", "maximal", "party-starter", "gritty", "dynamic", "rebellious"),
    ),
    "Lo-Fi Nostalgia": VibeSignal(
        core=LOFI,
        broad=("indie", "chill"),
        boost=("nostalgic", "hazy", "tape", "warm"),
        anti=("metal", "loud", "aggressive", "hard"),
        descriptors=("lo-fi", "nostalgic", "hazy", "warm", "bedroom", "intimate"),
    ),

    # ── Folk / Country ──
    "Fireplace Folk": VibeSignal(
        core=FOLK,
        broad=("acoustic", "singer songwriter"),
        boost=("cozy", "intimate", "campfire", "warm"),
        anti=("electronic", "metal", "punk", "trap"),
        descriptors=("acoustic", "warm", "intimate", "organic", "peaceful", "gentle"),
    ),
    "Honey Glow": VibeSignal(
        core=COUNTRY_MOD,
        broad=("country",),
        boost=("sweet", "sunny", "warm"),
        anti=("outlaw", "dark", "hard", "metal"),
        descriptors=("warm", "sunny", "bright", "acoustic", "gentle", "earworm"),
    ),
    "Saddle Up": VibeSignal(
        core=COUNTRY_CLASSIC,
        broad=("country",),
        boost=("road trip", "driving", "sing along"),
        anti=("pop", "electronic", "edm"),
        descriptors=("countryside", "timeless", "authentic", "road-trip", "driving", "storytelling"),
    ),
    "Vintage Warmth": VibeSignal(
        core=AMERICANA + ("delta blues", "chicago blues", "blues"),
        broad=("classic", "retro", "traditional"),
        boost=("analog", "vinyl", "timeless"),
        anti=("electronic", "modern", "edm", "trap"),
        descriptors=("timeless", "retro", "authentic", "warm", "nostalgic", "raw"),
    ),
    "Scenic Route": VibeSignal(
        core=("road trip", "back roads", "alt country", "folk rock"),
        broad=("americana", "country", "folk", "acoustic"),
        boost=("countryside", "rural", "open road", "wandering"),
        anti=("club", "electronic", "trap", "urban"),
        descriptors=("road-trip", "countryside", "expansive", "authentic", "wistful", "driving"),
    ),

    # ── Morning / Drive ──
    "Sunrise Drive": VibeSignal(
        core=MORNING + ("commute",),
        broad=("driving", "indie"),
        boost=("peaceful", "hopeful", "gentle", "moving"),
        anti=("dark", "aggressive", "night", "late night"),
        descriptors=("early-morning", "commute", "peaceful", "driving", "hopeful", "gentle"),
    ),

    # ── Summer / Outdoors ──
    "Windows Down": VibeSignal(
        core=SUMMER + ("surf rock",),
        broad=("pop", "rock"),
        boost=("driving", "road trip", "windows down", "golden"),
        anti=("dark", "sad", "melancholic", "winter"),
        descriptors=("sunny", "coastal", "road-trip", "uplifting", "bright", "driving"),
    ),
    "Hammock Mode": VibeSignal(
        core=CHILL,
        broad=("ambient", "acoustic"),
        boost=("breeze", "lazy", "sunday", "warm"),
        anti=("aggressive", "loud", "metal", "trap", "party"),
        descriptors=("peaceful", "gentle", "floating", "wind-down", "warm", "effortless"),
    ),
    "Under A Palm Tree": VibeSignal(
        core=REGGAE,
        broad=("tropical", "island"),
        boost=("sunny", "warm", "beach"),
        anti=("metal", "punk", "trap"),
        descriptors=("sunny", "warm", "swaying", "groove-locked", "coastal", "effortless"),
    ),

    # ── Chill / Immersion ──
    "Rainy Day Replay": VibeSignal(
        core=("rainy day", "rain") + SAD,
        broad=("sad", "ballad"),
        boost=("piano", "acoustic", "soft", "solo"),
        anti=("happy", "party", "upbeat", "summer"),
        descriptors=("rainy-day", "melancholic", "bittersweet", "introspective", "wind-down", "tender"),
    ),
    "Zen Garden": VibeSignal(
        core=STUDY + ("lofi beats",),
        broad=("instrumental", "ambient"),
        boost=("minimal", "peaceful", "zen"),
        anti=("vocal", "loud", "aggressive", "party"),
        descriptors=("study-session", "minimal", "hypnotic", "spacious", "peaceful", "lo-fi"),
    ),
    "Do Not Disturb": VibeSignal(
        core=CINEMATIC + ("post rock",),
        broad=("atmospheric", "instrumental"),
        boost=("epic", "intense", "powerful", "deep"),
        anti=("pop", "party", "dance", "upbeat"),
        descriptors=("cinematic", "spacious", "introspective", "expansive", "haunting", "layered"),
    ),

    # ── Heavy / Metal ──
    "Full Throttle": VibeSignal(
        core=METAL,
        broad=("metal", "hardcore"),
        boost=("power", "speed", "intense"),
        anti=("chill", "acoustic", "jazz", "pop"),
        descriptors=("relentless", "explosive", "defiant", "dark", "driving", "raw"),
    ),
    "Mosh Pit Magic": VibeSignal(
        core=METAL_CORE + ("mosh", "breakdown"),
        broad=("hardcore", "punk"),
        boost=("pit", "crowd", "chaos"),
        anti=("chill", "mellow", "acoustic", "jazz"),
        descriptors=("cathartic", "explosive", "relentless", "defiant", "kinetic", "raw"),
    ),
    "Dad Rock": VibeSignal(
        core=ROCK_CLASSIC,
        broad=("rock",),
        boost=("guitar solo", "anthem", "stadium"),
        anti=("trap", "electronic", "edm", "lo fi"),
        descriptors=("timeless", "anthemic", "driving", "retro", "crowd-pleaser", "warm"),
    ),

    # ── Vocal / Emotional ──
    "Heart on Sleeve": VibeSignal(
        core=BALLAD + ("breakup anthem", "pop ballad"),
        broad=("pop", "anthem"),
        boost=("emotional", "dramatic", "vocal", "sing along"),
        anti=("instrumental", "minimal", "lo fi", "ambient"),
        descriptors=("anthemic", "vocal-forward", "cathartic", "romantic", "uplifting", "euphoric"),
    ),
    "Side B": VibeSignal(
        core=POP_PUNK,
        broad=("sing along", "rock anthem", "2000s"),
        boost=("nostalgic", "anthemic", "car", "youth"),
        anti=("jazz", "classical", "ambient", "chill"),
        descriptors=("anthemic", "nostalgic", "cathartic", "crowd-pleaser", "driving", "earworm"),
    ),

    # ── Latin / Afro / Global ──
    "Pulso": VibeSignal(
        core=LATIN_URBAN + LATIN_TRAD,
        broad=("latin", "latin pop"),
        boost=("fiesta", "bass", "perreo"),
        anti=("folk", "country", "acoustic", "jazz"),
        descriptors=("pulsing", "kinetic", "party-starter", "bass-heavy", "beat-driven", "crowd-pleaser"),
    ),
    "Palmwine Nights": VibeSignal(
        core=AFRO + AFRO_DANCE,
        broad=("nigerian", "ghanaian", "south african", "african"),
        boost=("groove", "warm", "night", "melodic"),
        anti=("metal", "punk", "country", "folk"),
        descriptors=("groove-locked", "warm", "sunny", "swaying", "melody-first", "effortless"),
    ),

    # ── Digital / Synth ──
    "Pixelated Pop": VibeSignal(
        core=HYPERPOP + GLITCH + ("deconstructed",),
        broad=("glitch", "electronic"),
        boost=("digital", "chaotic", "warped", "futuristic"),
        anti=("acoustic", "folk", "country", "jazz"),
        descriptors=("synthetic", "maximal", "playful", "futuristic", "bright", "experimental"),
    ),
    "Electric Daydream": VibeSignal(
        core=SYNTH + ("darkwave",),
        broad=("synth", "electronic", "new wave"),
        boost=("cinematic", "driving", "neon", "city"),
        anti=("acoustic", "folk", "country"),
        descriptors=("synthetic", "cinematic", "dreamy", "shimmering", "driving", "retro"),
    ),
    "In Sync": VibeSignal(
        core=KPOP,
        broad=JPOP,
        boost=("choreography", "polished", "idol", "visual"),
        anti=("folk", "country", "jazz", "metal"),
        descriptors=("polished", "earworm", "bright", "kinetic", "maximal", "crisp"),
    ),

    # ── Fallback ──
    UNCLASSIFIED: VibeSignal(
        core=(),
        descriptors=FALLBACK_DESCRIPTORS,
    ),
}

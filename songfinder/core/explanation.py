"""
SongFinder Explanation Generator
추정 특성 -> 사람이 읽는 설명 (TL;DR 3줄 + 섹션별 문장)
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class ExplanationInput:
    """설명 생성 입력 (fingerprint 값 그대로)"""
    bpm: int
    key: str                 # 음이름 또는 "Unknown"
    mode: str                # "Major", "Minor", "Unknown"
    time_signature: int
    danceability: float
    energy: float
    valence: float
    acousticness: float
    instrumentalness: float
    loudness: float


@dataclass(frozen=True)
class Explanation:
    tldr: List[str]
    rhythm: List[str] = field(default_factory=list)
    harmony_mood: List[str] = field(default_factory=list)
    sound_texture: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "tldr": list(self.tldr),
            "sections": {
                "rhythm": list(self.rhythm),
                "harmony_mood": list(self.harmony_mood),
                "sound_texture": list(self.sound_texture),
            },
        }


# =============================================================================
# TL;DR 템플릿
# =============================================================================

# (템포 구간, 댄서빌리티 구간) -> 문장
GROOVE_TEMPLATES: Dict[tuple, str] = {
    ("slow", "low"): "A slow, contemplative rhythm that invites deep listening.",
    ("slow", "mid"): "A laid-back tempo with a subtle groove that sways gently.",
    ("slow", "high"): "A slow burner with surprisingly strong rhythmic pull.",
    ("medium", "low"): "A moderate pace that emphasizes melody over movement.",
    ("medium", "mid"): "A comfortable mid-tempo groove that feels natural and easy.",
    ("medium", "high"): "A mid-tempo track with strong dance-floor appeal.",
    ("fast", "low"): "A brisk tempo but with restrained rhythmic intensity.",
    ("fast", "mid"): "An upbeat tempo with solid rhythmic momentum.",
    ("fast", "high"): "A driving, dance-ready rhythm that keeps energy high.",
    ("very_fast", "low"): "A racing tempo that prioritizes intensity over groove.",
    ("very_fast", "mid"): "A fast-paced track with steady rhythmic foundation.",
    ("very_fast", "high"): "A high-speed rhythm built for maximum movement.",
}

# (모드, 밸런스 구간) -> 문장
MOOD_TEMPLATES: Dict[tuple, str] = {
    ("Major", "low"): "A major key with unexpectedly dark emotional undertones.",
    ("Major", "mid"): "A balanced major-key mood that feels thoughtful and grounded.",
    ("Major", "high"): "A bright, uplifting major-key sound that radiates positivity.",
    ("Minor", "low"): "A minor key that deepens the introspective, moody atmosphere.",
    ("Minor", "mid"): "A minor-key foundation with nuanced emotional texture.",
    ("Minor", "high"): "A minor key with surprising warmth and emotional lift.",
    ("Unknown", "low"): "A deeply atmospheric, emotionally weighty mood.",
    ("Unknown", "mid"): "A balanced emotional tone with room for interpretation.",
}
MOOD_FALLBACK = "An emotionally bright and engaging overall feel."

# (어쿠스틱 구간, 음량 구간) -> 문장
TEXTURE_TEMPLATES: Dict[tuple, str] = {
    ("acoustic", "punchy"): "Acoustic instrumentation with forward, present sound.",
    ("acoustic", "moderate"): "Warm acoustic textures at comfortable listening levels.",
    ("acoustic", "soft"): "Gentle acoustic tones that feel intimate and delicate.",
    ("mixed", "punchy"): "A blend of organic and produced sounds with punchy presence.",
    ("mixed", "moderate"): "Balanced production mixing acoustic and electronic elements.",
    ("mixed", "soft"): "Subtle production with restrained, atmospheric layers.",
    ("produced", "punchy"): "Heavily produced with bold, in-your-face sound design.",
    ("produced", "moderate"): "Polished production with clear, well-balanced mix.",
    ("produced", "soft"): "Softly produced textures that prioritize atmosphere.",
}

TIME_SIGNATURE_SENTENCES: Dict[int, str] = {
    4: "The 4/4 time signature provides a familiar, steady pulse.",
    3: "The 3/4 time signature creates a waltz-like, flowing feel.",
    6: "The 6/8 time signature adds a rolling, compound groove.",
    5: "The unusual 5/4 time signature creates an asymmetric, distinctive rhythm.",
    7: "The 7/4 time signature brings complexity and unpredictability.",
}


# =============================================================================
# 구간 판정
# =============================================================================

def _tempo_bucket(bpm: float) -> str:
    if bpm < 90:
        return "slow"
    if bpm <= 120:
        return "medium"
    if bpm <= 150:
        return "fast"
    return "very_fast"


def _dance_bucket(danceability: float) -> str:
    if danceability < 0.4:
        return "low"
    if danceability <= 0.75:
        return "mid"
    return "high"


def _valence_bucket(valence: float) -> str:
    if valence < 0.35:
        return "low"
    if valence <= 0.7:
        return "mid"
    return "high"


def _acoustic_bucket(acousticness: float) -> str:
    if acousticness > 0.6:
        return "acoustic"
    if acousticness >= 0.25:
        return "mixed"
    return "produced"


def _loudness_bucket(loudness: float) -> str:
    if loudness > -6:
        return "punchy"
    if loudness >= -12:
        return "moderate"
    return "soft"


def _tldr_groove(bpm: float, danceability: float) -> str:
    return GROOVE_TEMPLATES[(_tempo_bucket(bpm), _dance_bucket(danceability))]


def _tldr_mood(mode: str, valence: float) -> str:
    return MOOD_TEMPLATES.get((mode, _valence_bucket(valence)), MOOD_FALLBACK)


def _tldr_texture(acousticness: float, loudness: float) -> str:
    return TEXTURE_TEMPLATES[(_acoustic_bucket(acousticness), _loudness_bucket(loudness))]


# =============================================================================
# 섹션 문장
# =============================================================================

def _rhythm_bullets(bpm: int, time_signature: int, danceability: float) -> List[str]:
    if bpm < 80:
        tempo = f"At {bpm} BPM, this track moves at a deliberate, slow pace."
    elif bpm < 100:
        tempo = f"At {bpm} BPM, this track has a relaxed, laid-back tempo."
    elif bpm < 120:
        tempo = f"At {bpm} BPM, this track sits in a comfortable mid-tempo zone."
    elif bpm < 140:
        tempo = f"At {bpm} BPM, this track has an upbeat, energetic tempo."
    else:
        tempo = f"At {bpm} BPM, this track races forward with high-speed momentum."

    meter = TIME_SIGNATURE_SENTENCES.get(
        time_signature,
        f"The {time_signature}/4 time signature shapes the rhythmic foundation.",
    )

    if danceability < 0.3:
        groove = "Rhythmically sparse, this track prioritizes texture over groove."
    elif danceability < 0.5:
        groove = "The rhythm has subtle movement without demanding dance engagement."
    elif danceability < 0.7:
        groove = "A solid rhythmic backbone encourages natural body movement."
    else:
        groove = "Strong beat patterns create an irresistible urge to move."

    return [tempo, meter, groove]


def _harmony_mood_bullets(key: str, mode: str, valence: float) -> List[str]:
    bullets: List[str] = []

    if key == "Unknown":
        bullets.append("The harmonic center is unclear from metadata, but the mood and groove cues remain strong.")
    else:
        bullets.append(f"Rooted in {key} {mode.lower()}, the harmony sets a clear tonal foundation.")

    # 모드 문장은 Major/Minor일 때만
    if mode == "Major":
        bullets.append("The major mode generally conveys openness and resolution.")
    elif mode == "Minor":
        bullets.append("The minor mode adds depth and a sense of tension or longing.")

    if valence < 0.25:
        bullets.append("Emotionally heavy, the track carries a dark, introspective weight.")
    elif valence < 0.45:
        bullets.append("A melancholic undercurrent colors the emotional landscape.")
    elif valence < 0.65:
        bullets.append("The emotional tone sits in a balanced, bittersweet middle ground.")
    elif valence < 0.85:
        bullets.append("Warmth and positivity flow through the harmonic choices.")
    else:
        bullets.append("Bright and exuberant, the track overflows with joyful energy.")

    return bullets


def _sound_texture_bullets(acousticness: float, instrumentalness: float, loudness: float) -> List[str]:
    bullets: List[str] = []

    if acousticness > 0.75:
        bullets.append("Predominantly acoustic, natural instrument tones define the sound.")
    elif acousticness > 0.5:
        bullets.append("Acoustic elements play a significant role in the sonic palette.")
    elif acousticness > 0.25:
        bullets.append("Production blends acoustic and electronic elements in balance.")
    else:
        bullets.append("Electronic production and synthesis dominate the sound design.")

    if instrumentalness > 0.7:
        bullets.append("The track leans heavily instrumental, with minimal vocal presence.")
    elif instrumentalness > 0.4:
        bullets.append("Instruments and vocals share the spotlight in balanced proportion.")
    else:
        bullets.append("Vocals take center stage as the primary melodic vehicle.")

    if loudness > -5:
        bullets.append("Mastered loud and punchy for maximum impact.")
    elif loudness > -8:
        bullets.append("Solid dynamic range with assertive but controlled loudness.")
    elif loudness > -12:
        bullets.append("Moderate loudness preserves subtle dynamic nuances.")
    else:
        bullets.append("Quiet and restrained, allowing for intimate listening.")

    return bullets


def generate_explanation(data: ExplanationInput) -> Explanation:
    """
    설명 생성

    Returns:
        Explanation (tldr: groove / mood / texture 순서의 3문장)
    """
    return Explanation(
        tldr=[
            _tldr_groove(data.bpm, data.danceability),
            _tldr_mood(data.mode, data.valence),
            _tldr_texture(data.acousticness, data.loudness),
        ],
        rhythm=_rhythm_bullets(data.bpm, data.time_signature, data.danceability),
        harmony_mood=_harmony_mood_bullets(data.key, data.mode, data.valence),
        sound_texture=_sound_texture_bullets(data.acousticness, data.instrumentalness, data.loudness),
    )

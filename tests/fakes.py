"""
Deterministic Last.fm stand-in for engine and API tests.

Implements the subset of ``LastFmClient`` the analysis engine calls,
backed by in-memory dictionaries. No network access.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from songfinder.core.lastfm import (
    LastFmApiError,
    SimilarArtist,
    SimilarTrack,
    TrackDetails,
    TrackNotFoundError,
    TrackStub,
    generate_track_id,
)


def make_details(name: str, artist: str, tags: Iterable[str], image: Optional[str] = None) -> TrackDetails:
    return TrackDetails(
        id=generate_track_id(name, artist),
        name=name,
        artist=artist,
        artist_id=generate_track_id("artist", artist),
        album="Test Album",
        album_id=generate_track_id("album", "Test Album"),
        album_image_url=image,
        external_url=f"https://www.last.fm/music/{artist}/_/{name}",
        duration=200.0,
        tags=list(tags),
    )


def make_similar(name: str, artist: str, match: float = 0.5) -> SimilarTrack:
    return SimilarTrack(
        id=generate_track_id(name, artist),
        name=name,
        artist=artist,
        artist_id=generate_track_id("artist", artist),
        external_url=f"https://www.last.fm/music/{artist}/_/{name}",
        match=match,
    )


def make_stub(name: str, artist: str) -> TrackStub:
    return TrackStub(id=generate_track_id(name, artist), name=name, artist=artist, url="u", listeners=10)


class FakeLastFm:
    """In-memory Last.fm client."""

    def __init__(
        self,
        details: Sequence[TrackDetails] = (),
        artist_tags: Optional[Dict[str, List[str]]] = None,
        similar: Sequence[SimilarTrack] = (),
        similar_artists: Sequence[SimilarArtist] = (),
        top_tracks: Optional[Dict[str, List[TrackStub]]] = None,
        search_results: Sequence[TrackStub] = (),
        failing: Iterable[str] = (),
    ) -> None:
        self.details = {d.name: d for d in details}
        self.artist_tags = artist_tags or {}
        self.similar = list(similar)
        self.similar_artists = list(similar_artists)
        self.top_tracks = top_tracks or {}
        self.search_results = list(search_results)
        self.failing = set(failing)
        self.track_info_calls: List[str] = []

    def search_tracks(self, name: str, artist: Optional[str] = None, limit: int = 10) -> List[TrackStub]:
        return self.search_results[:limit]

    def get_track_info(self, name: str, artist: str) -> TrackDetails:
        self.track_info_calls.append(name)
        if name in self.failing:
            raise LastFmApiError("Operation failed", 500, 8)
        if name not in self.details:
            raise TrackNotFoundError()
        return self.details[name]

    def with_artist_tags(self, tags: List[str], artist: str) -> List[str]:
        return list(dict.fromkeys(list(tags) + self.artist_tags.get(artist, [])))

    def get_similar_tracks(self, name: str, artist: str, limit: int = 30) -> List[SimilarTrack]:
        return self.similar[:limit]

    def get_similar_artists(self, artist: str, limit: int = 10) -> List[SimilarArtist]:
        return self.similar_artists[:limit]

    def get_artist_top_tracks(self, artist: str, limit: int = 10) -> List[TrackStub]:
        if artist in self.failing:
            raise LastFmApiError("Operation failed", 500, 8)
        return self.top_tracks.get(artist, [])[:limit]

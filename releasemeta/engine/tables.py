"""Static lookup tables shared by every parse call.

The tables are built once at import time into a frozen :class:`ReleaseTables`
and handed to :class:`~releasemeta.engine.parser.ReleaseParser` by reference.
Nothing here is ever mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

# Uploader / distribution-channel names glued into release file names.
# Stored without the leading "@"; the matcher adds that variant itself.
CHANNEL_NAMES: Tuple[str, ...] = (
    "9xmovies", "bolly4u", "bollyclub", "bollyflix", "bollyflixhd",
    "BollywoodCinemaHD", "BollywoodCineMate", "BollywoodFlixHQ", "BollywoodMateHD",
    "BollywoodPrimeHD", "BollywoodPrimeZone", "BollywoodStreamHD", "BollywoodVerseHD",
    "cineadda", "CineAddaHD", "CineAddaMovies", "CineAddictHD", "CineArena",
    "CineArenaIndia", "CineBaseIndia", "CineBaseMovies", "CineBaseOfficial",
    "CineBayMovies", "CineBoxHD", "CineBoxOfficeHD", "CineBoxPro", "CineBuzzHD",
    "CineBuzzMovies", "CineBuzzPro", "CineCastleMovies", "CineCastMovies",
    "CineCatchMovies", "CineChannelMovies", "CineCineHD", "CineCloudHD",
    "CineCloudPro", "cineclub", "CineClubHD", "CineClubMovies", "CineClubPro",
    "cineclubx", "CineCoreHub", "CineCoreMovies", "CineCrateHD", "cinecrew",
    "CineCrewHD", "CineCrewMovies", "CineCrownHD", "CineDeckHD", "CineDropHub",
    "CineEdgeHD", "CineEdgeMovies", "CineFileHD", "CineFileMovies", "CineFilmHD",
    "cinefire", "CineFlickHub", "CineFlickMovies", "CineFlicksOfficial", "cineflix",
    "CineFlixHD", "CineFlixIndia", "CineFlixPro", "CineFlowMovies", "CineFreakMovies",
    "cinegalaxy", "cinegalaxyhd", "CineGalaxyHub", "CineGateMovies", "CineGoldMovies",
    "CineHDWorld", "cinehub", "CineHubX", "CineIndiaHD", "CineKingHD",
    "CineKingMovies", "CineKingPro", "CineKingVerse", "cineland", "cinelandhd",
    "cinelandhub", "CineLightMovies", "CineLineMovies", "CineLinkHD", "CineLinkMovies",
    "CineLoversHub", "cinemania", "cinemaniacs", "CineManiaHD", "CineMasterHD",
    "CineMasterIndia", "CineMateHD", "CineMateIndia", "CineMatrixHD", "cinemaxhd",
    "CineMaxMovies", "cinemaxworld", "CineMediaHD", "CineMovieZone", "CineNextHub",
    "CineNovaHD", "CineNovaMovies", "cinepack", "CinePackHD", "cinepath", "cineplanet",
    "CinePlanetHD", "CinePlanetIndia", "CinePlayHub", "CinePlayIndia",
    "CinePlayMovies", "CinePlayPro", "CinePointHD", "CinePortHD", "CinePortMovies",
    "CinePortPro", "CinePortX", "cinepost", "CinePostMovies", "CinePrimeHD",
    "CinePrimeIndia", "CinePrimeOfficial", "CinePrimeWorld", "CinePrimeZone",
    "cinepro", "CinePulseMovies", "CineRealmHD", "CineReelHD", "CineRoomMovies",
    "CineRushMovies", "CineScopeHD", "CineScreenHD", "CineScreenPro", "CineSeriesHD",
    "CineSeriesPro", "CineShowHD", "CineShowMovies", "CineSouthMovies",
    "CineSouthOfficial", "CineSpaceHD", "CineSpaceMovies", "CineSpotHD", "CineSpotHQ",
    "CineSpotIndia", "CineSpotMovies", "CineSpotPro", "CineSpotWorld", "CineStarHD",
    "CineStarMovies", "CineStarPro", "cinestream", "CineStreamHD", "cinestreamhub",
    "CineStreamIndia", "CineStreamMax", "CineStreamOfficial", "CineStreamPlus",
    "CineStreamPro", "CineStreamUniverse", "CineStreamWorld", "cinestreamx",
    "CineStreamZone", "CineStreetMovies", "CineSyncHD", "CineTimeMovies",
    "CineTownMovies", "CineTrendHD", "CineTrendMovies", "CineTuneHD", "CineTuneMovies",
    "cineuniverse", "CineUploadMovies", "CineVaultHub", "CineVaultIndia",
    "CineVaultMovies", "CineVaultPro", "cineverse", "CineVerseHD", "CineVerseOfficial",
    "cinevibe", "CineViewHD", "CineViewMovies", "CineViewPro", "CineVisionMovies",
    "cinewar", "CineWatchMovies", "CineWatchPro", "CineWavesHub", "CineWebHD",
    "CineWorldAdda", "CineWorldHQ", "CineWorldIndia", "CineWorldMoviesHD",
    "CineWorldPlus", "CineWorldPrime", "CineWorldPro", "CineXMovies", "cinexpress",
    "CineXpressMovies", "CineXtraMovies", "CineXverse", "cinezone", "cinezonehd",
    "CineZoneOfficial", "CineZonePro", "CineZoneWorld", "cinezonex", "ClipmateMovies",
    "coolmoviez", "DesiCineHub", "desiflix", "desimovies", "DesiMovieWorld",
    "extramovies", "FilmVerseHD", "filmyhit", "filmymeet", "filmywap", "filmyworld",
    "filmyzilla", "flixadda", "FlixArenaMovies", "flixbase", "flixboss", "flixclub",
    "flixcorner", "flixhive", "flixhub", "flixking", "FlixKingMovies", "flixlovers",
    "FlixMateIndia", "FlixMateOfficial", "FlixMateZone", "flixplanet",
    "FlixStreamOfficial", "flixstudio", "FlixTownMovies", "flixuniverse", "flixverse",
    "FlixverseHD", "flixvilla", "flixworld", "flixxpress", "flixxworld", "flixzone",
    "hdadda", "hdhub", "hdhub4u", "HellKing69", "hellkingbot", "HindiAddaMovies",
    "HindiCineMate", "HindiDubbedVerse", "HindiMoviesZone", "HindiMoviezMate",
    "hubcrew", "IndianCinemaVerse", "katmovie", "katmovies", "kingofmovies", "mlwbd",
    "movieadda", "MovieAddaHQ", "MovieAddaOfficial", "MovieArenaHD", "MovieArenaIndia",
    "MovieArenaPro", "MovieBaseHD", "MovieBaseZone", "MovieBayHD", "MovieBazarHD",
    "movieboss", "MovieBoxHD", "MovieBoxIndia", "MovieBoxPro", "MovieBuzzHD",
    "MovieBuzzIndia", "MovieBytesHD", "MovieCastHD", "MovieCatchHD", "MovieCineHub",
    "MovieCineWorld", "MovieCloudHub", "movieclub", "moviecorner", "MovieCornerHD",
    "MovieCornerIndia", "MovieCrateHD", "moviecrew", "MovieCrewHD", "MovieCrushHD",
    "MovieDeckHD", "MovieDockHD", "MovieDockHub", "MovieDreamHD", "MovieDreamsHD",
    "MovieDreamWorld", "MovieDuniyaHD", "movieempire", "MovieEmpireHD", "MovieEpicHub",
    "MovieFactoryHD", "MovieFilesHD", "MovieFinderHD", "MovieFlixHD", "MovieFlixZone",
    "MovieFlowHQ", "MovieFusionHD", "moviegalaxy", "MovieGalaxyHD", "moviegod",
    "MovieHitZone", "MovieHubHQ", "MovieHubIndia", "MovieHubSouth", "MovieJoyHD",
    "movieking", "MovieKingHD", "movieland", "MovieLandHD", "movielandhub",
    "MovieLinkHD", "MovieLinkZone", "MovieLoungeHD", "movielovers", "MovieMagicHD",
    "MovieMagicIndia", "moviemaniac", "MovieManiaHD", "MovieManiaOfficial",
    "MovieManorHD", "MovieMantraHD", "moviemaster", "MovieMasterHD", "MovieMatrixHD",
    "MovieMediaHD", "MovieMoodHD", "MovieMotionHD", "MovieNationHD", "MovieNationPlus",
    "MovieNationPro", "MovieNexusHD", "MovieNovaHQ", "MoviePassHD", "movieplanet",
    "MoviePlanetOfficial", "MoviePlanetPro", "MoviePlanetX", "MoviePlayHQ",
    "MoviePlusHD", "MoviePlusOfficial", "MoviePointHQ", "MoviePointZone",
    "MoviePortHD", "MoviePortOfficial", "MoviePortPro", "MoviePortX", "MoviePrimeHub",
    "MoviePrimeOfficial", "MoviePulseHD", "MovieRealmHD", "MovieReelHD", "MovieRoomHQ",
    "movierulz", "moviesadda", "MovieSagaHD", "moviesflix", "movieshub", "movieshubhd",
    "MovieSkyHD", "MovieSkyOfficial", "MovieSkyPro", "moviesmod", "MovieSpotHD",
    "MovieSpotOfficial", "MovieSpotPlus", "MovieSpotWorld", "MovieStageHD",
    "MovieStationHD", "MovieStoreHD", "MovieStoreOfficial", "MovieStreamHD",
    "MovieStreamIndia", "MovieStreamPlus", "MovieStreamPro", "MovieStreamWorld",
    "moviesverse", "MovieSyncHD", "MovieTimeIndia", "MovieTimeOfficial",
    "MovieTimePlus", "MovieTimeWorld", "MovieTimeX", "movieuniverse", "MovieVaultHD",
    "MovieVaultPro", "MovieVaultWorld", "MovieVaultZone", "MovieVerseHD",
    "MovieVerseHQ", "MovieVerseIndia", "MovieVerseOfficial", "MovieVersePlus",
    "MovieVerseWorld", "MovieVibeOfficial", "MovieVibesHD", "MovieWalaHD",
    "MovieWalaOfficial", "moviewarrior", "MovieWatchHD", "MovieWaveHD", "MovieWavesHD",
    "movieworld", "movieworld4u", "movieworldhd", "MovieWorldHub",
    "MovieWorldOfficial", "MovieWorldPlus", "MovieWorldsHD", "MovieWorldUniverse",
    "MovieWorldX", "MovieXpressHD", "MovieXpressOfficial", "moviezone", "moviezonehd",
    "MovieZoneIndia", "MovieZoneOfficial", "MovieZoneXpress", "primeflix",
    "primeflixhd", "primehub", "primeking", "primeworld", "ReelMateMovies",
    "ReelStreamHD", "ReelTimeMovies", "skymovies", "SouthActionMovies",
    "SouthBlockbusters", "SouthCinemaX", "SouthCineWorld", "SouthDubHD",
    "SouthFlicksHD", "SouthFlixMovies", "SouthHindiDubbed", "SouthHindiMovies",
    "SouthHitMovies", "SouthHQMovies", "SouthMovieWorld", "SouthPlusMovies",
    "SouthTrendzHD", "streamadda", "streamarena", "streambase", "streambox",
    "streamcenter", "streamclub", "streamcorner", "streamcrew", "streamdunia",
    "streamersclub", "streamershub", "streamersteam", "streamersverse",
    "streamersworld", "streamfile", "streamflix", "streamflixhd", "streamflixx",
    "streamhub", "streamhubhd", "StreamifyMovies", "streamking", "streamland",
    "streamline", "StreamLineMovies", "streammate", "StreamMateFilms",
    "StreamMateOfficial", "StreamMateX", "streamon", "streampath", "streamplanet",
    "streamplus", "streamspace", "streamtime", "streamvilla", "streamworld",
    "StreamWorldMovies", "streamxpress", "streamzone", "StreamZoneMovies",
    "TamilTeluguMovies", "vegamovies", "vegamovieshd", "WatchMateHD", "world4u",
    "world4ufree", "worldcrew",
)

# Generic platform/uploader noise removed from an already resolved title.
SPAM_WORDS: Tuple[str, ...] = (
    "10bit", "admin", "ads", "amzn", "area", "arena", "at", "audio", "autobot",
    "autofilter", "bazaar", "bdrip", "bluray", "bolly4u", "bot", "bott", "by",
    "center", "chanel", "channel", "chnl", "cine", "cinebot", "cinehub", "cinemaz",
    "club", "com", "comment", "community", "compressed", "compressedby", "coolmoviez",
    "core", "corner", "daily", "dl", "dm", "dot", "download", "dsnp", "dvdrip",
    "empire", "enc", "encode", "encoded", "exclusive", "facebook", "factory", "fast",
    "fastdl", "fb", "filebot", "filmhubbot", "flix", "flixbot", "follow", "followus",
    "free", "fresh", "from", "galaxy", "group", "grp", "hdprint", "hdrip", "hell_king",
    "hellking", "hevc", "house", "http", "https", "hub", "in", "insta", "instagram",
    "join", "king", "latest", "link", "lite", "market", "max", "mediahub", "mini",
    "mirror", "mix", "mod", "moviebot", "movierip", "msg", "nation", "net", "network",
    "new", "nf", "official", "on", "org", "orgnl", "pack", "planet", "plus", "pm",
    "post", "posted", "premium", "pro", "reel", "release", "repack", "reshare",
    "reupload", "rip", "share", "shared", "short", "shorts", "site", "space", "spot",
    "store", "studio", "subs", "subscribe", "t.me", "team", "tele", "telegram",
    "telegran", "telegrm", "tg", "tgbot", "tgbots", "tgchannel", "tggroup", "tglgrm",
    "tgram", "tlg", "tlgm", "tlgmovies", "tlgram", "tlgrm", "tlgrmbot", "top",
    "trending", "twitter", "ultra", "update", "updates", "upload", "uploadbot",
    "uploaded", "uploadedby", "uploadedon", "uploadedto", "uploader", "url", "vault",
    "verse", "vip", "web", "web-dl", "webdl", "webhd", "world", "www", "x264", "x265",
    "xpress", "xyz", "youtube", "yt", "zone",
    "aac", "avc", "camrip", "esub", "esubs", "fhd", "h264", "h265", "hd", "hdcam",
    "hdtv", "hq", "msubs", "predvd", "uhd", "webrip",
)

# canonical name -> spellings and codes seen in release names
_LANGUAGE_ALIASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    # Indic
    ("Hindi", ("hindi", "hin", "hn", "hi", "हिन्दी", "हिंदी")),
    ("English", ("english", "eng", "en", "e")),
    ("Tamil", ("tamil", "tam", "ta")),
    ("Telugu", ("telugu", "tel", "te")),
    ("Kannada", ("kannada", "kan", "kn")),
    ("Malayalam", ("malayalam", "mal", "ml")),
    ("Marathi", ("marathi", "mar", "mr")),
    ("Bengali", ("bengali", "ben", "bn", "be")),
    ("Gujarati", ("gujarati", "guj", "gj", "gu")),
    ("Punjabi", ("punjabi", "pan", "pa", "pb")),
    ("Odia", ("odia", "ori", "or", "od")),
    ("Assamese", ("assamese", "asm", "as")),
    ("Urdu", ("urdu", "urd", "ur")),
    # multi-track marker
    ("Dual Audio", ("dual", "audio")),
    # International
    ("Spanish", ("spanish", "spa", "sp", "es")),
    ("French", ("french", "fre", "fr", "f")),
    ("German", ("german", "ger", "de", "ge")),
    ("Italian", ("italian", "ita", "it")),
    ("Russian", ("russian", "rus", "ru")),
    ("Japanese", ("japanese", "jap", "jpn", "ja", "jp")),
    ("Korean", ("korean", "kor", "ko", "kr")),
    ("Chinese", ("chinese", "chi", "zh", "cn")),
    ("Arabic", ("arabic", "ara", "ar")),
    ("Turkish", ("turkish", "tur", "tr")),
    ("Portuguese", ("portuguese", "por", "pt", "br")),
    ("Thai", ("thai", "tha", "th")),
    ("Vietnamese", ("vietnamese", "vie", "vi")),
    ("Indonesian", ("indonesian", "ind", "id")),
    ("Filipino", ("filipino", "fil", "ph")),
    ("Dutch", ("dutch", "dut", "nl")),
    ("Polish", ("polish", "pol", "pl")),
    ("Ukrainian", ("ukrainian", "ukr", "ua")),
    ("Swedish", ("swedish", "swe", "se")),
    ("Norwegian", ("norwegian", "nor", "no")),
    ("Danish", ("danish", "dan", "dk")),
    ("Finnish", ("finnish", "fin", "fi")),
    ("Greek", ("greek", "gre", "el", "gr")),
    ("Hebrew", ("hebrew", "heb", "he", "iw")),
    ("Persian", ("persian", "per", "fa")),
    ("Burmese", ("burmese", "bur", "my", "mm")),
    ("Sinhala", ("sinhala", "sinh", "si")),
    ("Afrikaans", ("afrikaans", "afr", "af")),
    ("Latin", ("latin", "lat", "la")),
    ("Romanian", ("romanian", "rom", "ro")),
    ("Bulgarian", ("bulgarian", "bul", "bg")),
    ("Hungarian", ("hungarian", "hun", "hu")),
    ("Czech", ("czech", "cze", "cs")),
    ("Slovak", ("slovak", "slo", "sk")),
    ("Serbian", ("serbian", "srb", "sr")),
    ("Croatian", ("croatian", "cro", "hr")),
    ("Malay", ("malay", "maly", "ms")),
    ("Kazakh", ("kazakh", "kaz", "kk")),
    ("Mongolian", ("mongolian", "mon", "mn")),
    ("Armenian", ("armenian", "arm", "hy")),
    ("Georgian", ("georgian", "geo", "ka")),
    ("Tatar", ("tatar", "tat", "tt")),
)

# Tokens that start metadata when no year or season/episode marker exists.
TITLE_STOP_KEYWORDS: Tuple[str, ...] = (
    "4k", "2160p", "1080p", "720p", "480p", "web-dl", "webdl", "webrip", "bluray",
    "hdtv", "hdrip", "x264", "hindi", "english", "eng", "dual", "audio",
)

QUALITY_TAGS: Tuple[str, ...] = ("4k", "2160p", "1080p", "720p", "480p")

# "eng sub" / "esubs" describe subtitles, not an audio track
SUBTITLE_PREFIX = "eng"
SUBTITLE_SUFFIXES: Tuple[str, ...] = ("sub", "subs")
SUBTITLE_MARKERS: Tuple[str, ...] = ("esub", "esubs")


def _build_language_map() -> Mapping[str, str]:
    mapping = {}
    for canonical, aliases in _LANGUAGE_ALIASES:
        for alias in aliases:
            mapping.setdefault(alias.lower(), canonical)
    return MappingProxyType(mapping)


@dataclass(frozen=True)
class ReleaseTables:
    """Immutable bundle of the lookup tables used by the parser."""

    channel_names: Tuple[str, ...] = CHANNEL_NAMES
    spam_words: frozenset = field(default_factory=lambda: frozenset(w.lower() for w in SPAM_WORDS))
    languages: Mapping[str, str] = field(default_factory=_build_language_map)
    title_stop_keywords: frozenset = frozenset(TITLE_STOP_KEYWORDS)
    quality_tags: Tuple[str, ...] = QUALITY_TAGS
    subtitle_prefix: str = SUBTITLE_PREFIX
    subtitle_suffixes: frozenset = frozenset(SUBTITLE_SUFFIXES)
    subtitle_markers: frozenset = frozenset(SUBTITLE_MARKERS)

    @property
    def language_names(self) -> Tuple[str, ...]:
        seen = []
        for name in self.languages.values():
            if name not in seen:
                seen.append(name)
        return tuple(seen)


def build_release_tables(**overrides) -> ReleaseTables:
    """Default tables, with any field replaced by ``overrides``."""
    if "spam_words" in overrides:
        overrides["spam_words"] = frozenset(w.lower() for w in overrides["spam_words"])
    if "channel_names" in overrides:
        overrides["channel_names"] = tuple(overrides["channel_names"])
    return ReleaseTables(**overrides)


DEFAULT_TABLES = build_release_tables()

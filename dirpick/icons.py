from __future__ import annotations

from typing import Dict, Optional

from .models import DirectoryEntry

FOLDER_ICON = "📁"
DEFAULT_ICON = "📄"


def _expand(groups: Dict[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for keys, icon in groups.items():
        for ext in keys.split():
            out[ext] = icon
    return out


EXTENSION_ICONS: Dict[str, str] = _expand({
    # Languages
    "rs": "🦀",
    "py": "🐍",
    "js": "📜",
    "ts": "📘",
    "go": "🐹",
    "java": "☕",
    "c": "🇨",
    "cpp cc cxx": "🇨++",
    "cs": "🩸",
    "php": "🐘",
    "rb": "💎",
    "swift": "🍏",
    "kt kts": "🤖",
    "dart": "🎯",
    "scala": "🧪",
    "pl": "🐪",
    "r": "📊",
    "hs": "🧮",
    "lua": "🌘",
    "sh bash": "⚡",
    "ps1": "🐚",
    "vbs m": "🪟",
    "jl": "🟦",
    # Text and data
    "txt xml yaml yml": "📄",
    "md": "📝",
    "log": "📋",
    "csv": "🧮",
    "toml": "🔧",
    "json": "📦",
    # Web
    "html htm": "🌐",
    "css scss sass": "🎨",
    "jsx": "⚛️",
    "tsx": "📘",
    # Images
    "png jpg jpeg gif svg webp": "🖼️",
    # Archives and packages
    "zip tar gz 7z xz bz2 zst rpm": "📦",
    "deb": "🐧",
    "apk": "📱",
    "jar": "☕",
    "iso": "💿",
    "dmg": "🍎",
    "msi": "🪟",
    # Databases
    "sql": "🗄️",
    "db": "💾",
    # Media
    "mp3 wav ogg flac": "🔊",
    "mp4 avi mkv mov": "🎬",
    # Office
    "doc docx": "📘",
    "xls xlsx": "📊",
    "ppt pptx": "🖉",
    "pdf": "📄",
    # System
    "exe dll so": "⚙️",
    "appimage": "🚀",
    "lock": "🔒",
    "ttf otf": "🅰️",
    "bat cmd": "🪟",
})


def icon_for_extension(extension: Optional[str]) -> str:
    if not extension:
        return DEFAULT_ICON
    return EXTENSION_ICONS.get(extension.lower(), DEFAULT_ICON)


def icon_for(entry: DirectoryEntry) -> str:
    if entry.is_directory:
        return FOLDER_ICON
    return icon_for_extension(entry.extension)

"""Canned article payloads served when the content API cannot be reached.

Entries are shaped exactly like the API's article projection so that the
rest of the pipeline cannot tell live and fallback data apart.
"""

import copy
from typing import Any, Dict, List, Optional

DEFAULT_CATEGORY = "academy"


def _image(asset_id: str) -> Dict[str, Any]:
    return {
        "_type": "image",
        "asset": {"_ref": f"image-{asset_id}-1200x675-jpg", "_type": "reference"},
    }


_FALLBACK_ARTICLES: Dict[str, List[Dict[str, Any]]] = {
    "academy": [
        {
            "_id": "fallback-academy-1",
            "title": "Apa Itu Bitcoin? Panduan Lengkap untuk Pemula",
            "slug": {"current": "apa-itu-bitcoin"},
            "excerpt": "Kenali cara kerja Bitcoin, blockchain di baliknya, dan alasan aset ini disebut emas digital.",
            "image": _image("4f1c2b7a9e0d3c5b6a7f8e9d0c1b2a3f4e5d6c7b"),
            "category": "academy",
            "source": "Beluga Team",
            "publishedAt": "2025-01-06T08:00:00Z",
            "featured": True,
            "level": "Pemula",
            "topics": ["Bitcoin", "Blockchain"],
            "networks": ["Bitcoin Network"],
        },
        {
            "_id": "fallback-academy-2",
            "title": "Memahami Smart Contract di Ethereum",
            "slug": {"current": "memahami-smart-contract-ethereum"},
            "excerpt": "Smart contract menjalankan kesepakatan secara otomatis di atas blockchain. Begini cara kerjanya.",
            "image": _image("9a8b7c6d5e4f3a2b1c0d9e8f7a6b5c4d3e2f1a0b"),
            "category": "academy",
            "source": "Beluga Team",
            "publishedAt": "2025-01-13T08:00:00Z",
            "featured": False,
            "level": "Menengah",
            "topics": ["Ethereum", "Smart Contract"],
            "networks": ["Ethereum Network"],
        },
        {
            "_id": "fallback-academy-3",
            "title": "Cara Aman Menyimpan Aset Kripto di Wallet",
            "slug": {"current": "cara-aman-menyimpan-aset-kripto"},
            "excerpt": "Perbedaan hot wallet dan cold wallet, serta kebiasaan yang menjaga seed phrase tetap aman.",
            "image": _image("1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6e7f8a9b0c"),
            "category": "academy",
            "source": "Beluga Team",
            "publishedAt": "2025-01-20T08:00:00Z",
            "featured": False,
            "level": "Pemula",
            "topics": ["Wallet", "Keamanan"],
            "networks": [],
        },
        {
            "_id": "fallback-academy-4",
            "title": "Mengenal Layer 2: Arbitrum dan Polygon",
            "slug": {"current": "mengenal-layer-2"},
            "excerpt": "Solusi layer 2 memangkas biaya transaksi tanpa meninggalkan keamanan jaringan utama.",
            "image": _image("c0ffee00c0ffee00c0ffee00c0ffee00c0ffee00"),
            "category": "academy",
            "source": "Beluga Team",
            "publishedAt": "2025-01-27T08:00:00Z",
            "featured": False,
            "level": "Lanjutan",
            "topics": ["Layer 2", "Skalabilitas"],
            "networks": ["Arbitrum Network", "Polygon Network"],
        },
    ],
    "newsroom": [
        {
            "_id": "fallback-newsroom-1",
            "title": "Pasar Kripto Hari Ini: Bitcoin Bertahan di Atas Level Support",
            "slug": {"current": "pasar-kripto-hari-ini"},
            "excerpt": "Ringkasan pergerakan harga aset kripto utama dalam 24 jam terakhir.",
            "image": _image("0a1b2c3d4e5f60718293a4b5c6d7e8f901234567"),
            "category": "newsroom",
            "source": "Dunia Crypto",
            "publishedAt": "2025-02-03T06:00:00Z",
            "featured": True,
        },
        {
            "_id": "fallback-newsroom-2",
            "title": "Regulasi Aset Kripto di Indonesia: Yang Perlu Diketahui",
            "slug": {"current": "regulasi-aset-kripto-indonesia"},
            "excerpt": "Perubahan pengawasan aset kripto dan dampaknya bagi investor ritel.",
            "image": _image("fedcba9876543210fedcba9876543210fedcba98"),
            "category": "newsroom",
            "source": "Dunia Crypto",
            "publishedAt": "2025-02-04T06:00:00Z",
            "featured": False,
        },
        {
            "_id": "fallback-newsroom-3",
            "title": "Ethereum Menyiapkan Upgrade Jaringan Berikutnya",
            "slug": {"current": "ethereum-upgrade-berikutnya"},
            "excerpt": "Pengembang inti membahas jadwal dan fitur upgrade yang akan datang.",
            "image": _image("13579bdf02468ace13579bdf02468ace13579bdf"),
            "category": "newsroom",
            "source": "Dunia Crypto",
            "publishedAt": "2025-02-05T06:00:00Z",
            "featured": False,
        },
    ],
}


def known_categories() -> List[str]:
    return sorted(_FALLBACK_ARTICLES)


def fallback_for(category: Optional[str]) -> List[Dict[str, Any]]:
    """Return the canned article list for a category.

    Unknown or missing categories get the default category's articles. The
    result is a deep copy, so callers may mutate it freely.
    """

    if not isinstance(category, str) or category not in _FALLBACK_ARTICLES:
        category = DEFAULT_CATEGORY
    articles = _FALLBACK_ARTICLES[category]
    return copy.deepcopy(articles)

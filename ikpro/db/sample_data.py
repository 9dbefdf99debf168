# -*- coding: utf-8 -*-
"""İlk kurulumda eklenen örnek kayıtlar."""

from __future__ import annotations

SAMPLE_COMPANIES = [
    {
        "name": "TechCorp Yazılım A.Ş.",
        "industry": "Bilişim ve Teknoloji",
        "address": "Maslak Mahallesi Büyükdere Caddesi No:123, İstanbul",
        "phone": "+90 212 555 0123",
        "email": "info@techcorp.com.tr",
        "website": "https://www.techcorp.com.tr",
        "tax_number": "1234567890",
        "description": "Kurumsal yazılım çözümleri ve dijital dönüşüm hizmetleri",
    },
    {
        "name": "İnovasyon Mühendislik Ltd. Şti.",
        "industry": "Mühendislik",
        "address": "Atatürk Mahallesi Cumhuriyet Caddesi No:45, Ankara",
        "phone": "+90 312 555 0456",
        "email": "bilgi@inovasyon.com.tr",
        "website": "https://www.inovasyon.com.tr",
        "tax_number": "2345678901",
        "description": "Endüstriyel otomasyon ve mühendislik çözümleri",
    },
    {
        "name": "GlobalTrade İthalat İhracat A.Ş.",
        "industry": "Ticaret",
        "address": "Konak Mahallesi Alsancak Caddesi No:67, İzmir",
        "phone": "+90 232 555 0789",
        "email": "info@globaltrade.com.tr",
        "website": "https://www.globaltrade.com.tr",
        "tax_number": "3456789012",
        "description": "Uluslararası ticaret ve lojistik hizmetleri",
    },
]

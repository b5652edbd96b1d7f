"""Built-in locale formatters.

One module per locale. Each module exposes ``CATALOG``, ``FORMATTER``,
``format_message_<lang>(issue)`` and ``config_<lang>()``; the two functions
are re-exported here.

BUILTIN_FORMATTERS maps every pre-registered locale id to its formatter.
The bare "zh" id shares the Simplified Chinese formatter.

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from . import ar as _ar
from . import bg as _bg
from . import cs as _cs
from . import da as _da
from . import de as _de
from . import en as _en
from . import es as _es
from . import fa as _fa
from . import fi as _fi
from . import fr as _fr
from . import he as _he
from . import hu as _hu
from . import id as _id
from . import it as _it
from . import ja as _ja
from . import ko as _ko
from . import ms as _ms
from . import nl as _nl
from . import no as _no
from . import pl as _pl
from . import pt as _pt
from . import ru as _ru
from . import sv as _sv
from . import ta as _ta
from . import th as _th
from . import tr as _tr
from . import uk as _uk
from . import ur as _ur
from . import vi as _vi
from . import zh_cn as _zh_cn
from . import zh_tw as _zh_tw
from .ar import config_ar, format_message_ar
from .bg import config_bg, format_message_bg
from .cs import config_cs, format_message_cs
from .da import config_da, format_message_da
from .de import config_de, format_message_de
from .en import config_en, format_message_en
from .es import config_es, format_message_es
from .fa import config_fa, format_message_fa
from .fi import config_fi, format_message_fi
from .fr import config_fr, format_message_fr
from .he import config_he, format_message_he
from .hu import config_hu, format_message_hu
from .id import config_id, format_message_id
from .it import config_it, format_message_it
from .ja import config_ja, format_message_ja
from .ko import config_ko, format_message_ko
from .ms import config_ms, format_message_ms
from .nl import config_nl, format_message_nl
from .no import config_no, format_message_no
from .pl import config_pl, format_message_pl
from .pt import config_pt, format_message_pt
from .ru import config_ru, format_message_ru
from .sv import config_sv, format_message_sv
from .ta import config_ta, format_message_ta
from .th import config_th, format_message_th
from .tr import config_tr, format_message_tr
from .uk import config_uk, format_message_uk
from .ur import config_ur, format_message_ur
from .vi import config_vi, format_message_vi
from .zh_cn import config_zh_cn, format_message_zh_cn
from .zh_tw import config_zh_tw, format_message_zh_tw

if TYPE_CHECKING:
    from collections.abc import Mapping

    from schemalocale.types import LocaleFormatter

BUILTIN_FORMATTERS: Mapping[str, LocaleFormatter] = MappingProxyType(
    {
        "en": _en.FORMATTER,
        "zh-CN": _zh_cn.FORMATTER,
        "zh-TW": _zh_tw.FORMATTER,
        "zh": _zh_cn.FORMATTER,
        "de": _de.FORMATTER,
        "fr": _fr.FORMATTER,
        "es": _es.FORMATTER,
        "it": _it.FORMATTER,
        "pt": _pt.FORMATTER,
        "nl": _nl.FORMATTER,
        "pl": _pl.FORMATTER,
        "ru": _ru.FORMATTER,
        "uk": _uk.FORMATTER,
        "cs": _cs.FORMATTER,
        "da": _da.FORMATTER,
        "sv": _sv.FORMATTER,
        "tr": _tr.FORMATTER,
        "hu": _hu.FORMATTER,
        "fi": _fi.FORMATTER,
        "no": _no.FORMATTER,
        "bg": _bg.FORMATTER,
        "ja": _ja.FORMATTER,
        "ko": _ko.FORMATTER,
        "vi": _vi.FORMATTER,
        "th": _th.FORMATTER,
        "id": _id.FORMATTER,
        "ms": _ms.FORMATTER,
        "ta": _ta.FORMATTER,
        "ar": _ar.FORMATTER,
        "fa": _fa.FORMATTER,
        "he": _he.FORMATTER,
        "ur": _ur.FORMATTER,
    }
)

__all__ = [
    "BUILTIN_FORMATTERS",
    "config_ar",
    "config_bg",
    "config_cs",
    "config_da",
    "config_de",
    "config_en",
    "config_es",
    "config_fa",
    "config_fi",
    "config_fr",
    "config_he",
    "config_hu",
    "config_id",
    "config_it",
    "config_ja",
    "config_ko",
    "config_ms",
    "config_nl",
    "config_no",
    "config_pl",
    "config_pt",
    "config_ru",
    "config_sv",
    "config_ta",
    "config_th",
    "config_tr",
    "config_uk",
    "config_ur",
    "config_vi",
    "config_zh_cn",
    "config_zh_tw",
    "format_message_ar",
    "format_message_bg",
    "format_message_cs",
    "format_message_da",
    "format_message_de",
    "format_message_en",
    "format_message_es",
    "format_message_fa",
    "format_message_fi",
    "format_message_fr",
    "format_message_he",
    "format_message_hu",
    "format_message_id",
    "format_message_it",
    "format_message_ja",
    "format_message_ko",
    "format_message_ms",
    "format_message_nl",
    "format_message_no",
    "format_message_pl",
    "format_message_pt",
    "format_message_ru",
    "format_message_sv",
    "format_message_ta",
    "format_message_th",
    "format_message_tr",
    "format_message_uk",
    "format_message_ur",
    "format_message_vi",
    "format_message_zh_cn",
    "format_message_zh_tw",
]

"""Shared pytest fixtures for the geoturf test suite."""

from __future__ import annotations

import pytest

from geoturf.models.geometry import LineString, Polygon
from geoturf.models.position import BoundingBox, Position

# ---------------------------------------------------------------------------
# Encoded polyline fixtures
# ---------------------------------------------------------------------------

# Palermo to Rome, 256 positions at 1e5 precision.
PALERMO_TO_ROME = (
    "iasgFkxqpAbbCseDtrBmpDv_BgeEvtB_mDdjB_}Dz|@iuEjc@ihF`YcdFnn@__FjiAowErgAmoEvCwgFqOkbFiPghF"
    "oI{hFwNgfFcS}eFa}@e}EpRgyE|UslFfEgcFtWihFvSqhFbZi_Fm_AaoEknA}xDcBwiF}MsgF}IahF{EegFo_@kdFcN"
    "shFqYeiFmW}`FoVefF_NslFkyAeeEkrAilEw~AoeEyiAwpEcyBwpD{hAgqEc[weFyc@qbFiy@s|Ea`BkbEaUk`FvcA"
    "ouEfiAaqE]{hFqf@uaFky@gsEymBavDytBkyDqaCw_DkbBu~De`Au_Fsj@wyEk\\agFrUycFfx@ozEdfBc`EhBarEcl"
    "BiaEws@mtEgXijFMkjFeEmdFyn@mbFemAomE}fAwyE{yB_cDanDyy@_{C}nBu_DqlByaDqmBegDmuAitDkSknDwo@a"
    "kAmjEyrAewEcsAavEwqAwfEo|AwlE_}AgbEkoC{iCmuCoyBahDu_BcsDcNcoDys@aqDq\\gwD{EyqD{h@uhD{eAmrD"
    "uIwuD^grD~VodDbvAizC`zBm`DncBgbDryBa~C{\\qoDomAwoDmg@euDwJ{nDlp@_fDvtAmeDx{AgoDbhAenDz]{pD"
    "~a@}kDf`AqjDdiA_oD~t@ymDlLizDlLicDxgAw_DnoBgmDnn@_sDtEyrDfTulDrl@ymDt_AolD~}@irDb{@ycD`~@o"
    "uDnr@agDxr@unD~q@anDbq@skDby@icDh_BmnD|z@meDxm@qpDzr@yxDj_@s|Cdl@krBxzDaqBzwDu{B~yCg_DnxB_"
    "gC~jCgpC`eC{cCb{C}qBluDijBlrD_|BxkDuiChlCotB|{CquBt|DutB~wDmeB`oDcbBnlE{mAjlEciC|dAygDhaAe"
    "qCvdCk_CljDe{BzcDg~B~`D{zBdeD{}Bh_Ds}BxlDivB|kD_nBvmDueBnaEugBtvDu~Ax}DgcCxdDgsBzeDgkBxyDu"
    "}AdcEgt@`wEqr@pgF{^v{E_PngF_W|gF}s@x~E}^tbFef@r`Fu`AhvEay@l}E}o@tdFqlAzgE}z@~xEmjBfvDmnAhmE"
    "}bBrvDwcAh_Fyp@h|EewAxbEosA|nDu|BlxCkjBv{D}gB|aEyeB`bEw`B||Dq~Az}D}tBznDy}BnwCmjB~vDoiB|_E"
    "igBjxDwgBr~D{_BlcE{uA`gEozAvcEylBhvDa{BhdDioBlqDulBf~D}_BtuDm_CfhDo~CrqAscC`lC_eCfzCuzBffD"
    "e|AnbE{mBhuDogClnCquC~pBo_Cr|CeqBhnDeiB`{DudBnzDeqBtnDuoBhpD_qBdrDwcBn}D{aBn`EefBdxDshBtzDu"
    "mBdxDotAbeEazAzhEm_Bj}DcdB|zDylBpiDadBr|DqdBheEs_Bj~D{~A`cEiuAdlEm`AjsEsv@x`Feu@`mFcf@t}EmC"
    "faF}s@jzDs{CfiBsuB|zCusB|jDedB|zDaxBjiDgNpR"
)

# The reference example of the encoded polyline format.
REFERENCE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
REFERENCE_POSITIONS = [
    Position(latitude=38.5, longitude=-120.2),
    Position(latitude=40.7, longitude=-120.95),
    Position(latitude=43.252, longitude=-126.453),
]


@pytest.fixture()
def palermo_to_rome() -> str:
    """Encoded 256-point polyline from Palermo to Rome."""
    return PALERMO_TO_ROME


# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------


def ring(*lon_lat: tuple[float, float]) -> tuple[Position, ...]:
    """Build a ring from ``(lon, lat)`` pairs."""
    return tuple(Position(latitude=lat, longitude=lon) for lon, lat in lon_lat)


@pytest.fixture()
def unit_box() -> BoundingBox:
    """Box from (0, 0) to (10, 10) in lon/lat."""
    return BoundingBox(south=0.0, west=0.0, north=10.0, east=10.0)


@pytest.fixture()
def inner_square() -> Polygon:
    """Square entirely inside ``unit_box``."""
    return Polygon.of(ring((2, 2), (8, 2), (8, 8), (2, 8), (2, 2)))


@pytest.fixture()
def seam_square() -> Polygon:
    """Square from 170°E across the anti-meridian to 170°W."""
    return Polygon.of(ring((170, -10), (-170, -10), (-170, 10), (170, 10), (170, -10)))


@pytest.fixture()
def seam_line() -> LineString:
    """Line from 170°E to 170°W along the equator."""
    return LineString.of(ring((170, 0), (-170, 0)))

from enum import Enum


class Area(str, Enum):
    thong_sala = "THONG_SALA"
    srithanu = "SRITHANU"
    haad_rin = "HAAD_RIN"
    baan_tai = "BAAN_TAI"
    baan_kai = "BAAN_KAI"
    chaloklum = "CHALOKLUM"
    mae_haad = "MAE_HAAD"
    salad = "SALAD"
    hin_kong = "HIN_KONG"
    wok_tum = "WOK_TUM"
    other = "OTHER"

    @property
    def label(self) -> str:
        return AREA_LABELS[self]


AREA_LABELS: dict[Area, str] = {
    Area.thong_sala: "Thong Sala",
    Area.srithanu: "Srithanu",
    Area.haad_rin: "Haad Rin",
    Area.baan_tai: "Baan Tai",
    Area.baan_kai: "Baan Kai",
    Area.chaloklum: "Chaloklum",
    Area.mae_haad: "Mae Haad",
    Area.salad: "Salad",
    Area.hin_kong: "Hin Kong",
    Area.wok_tum: "Wok Tum",
    Area.other: "Other",
}

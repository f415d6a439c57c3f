"""Localized string bundles for prompts, tables and messages."""

from dataclasses import dataclass
from typing import Dict

from ..exceptions.custom_exceptions import ConfigurationError


@dataclass(frozen=True)
class StringBundle:
    """All operator-facing text for one language."""
    banner: str
    prompts: Dict[str, str]  # keyed by Inputs field
    validation: Dict[str, str]  # keyed by validation rule
    tables: Dict[str, str]
    input_labels: Dict[str, str]  # keyed by Inputs field
    output_labels: Dict[str, str]  # keyed by Results field
    tips: Dict[str, str]  # keyed by Results field
    cancelled: str


LANGUAGE_PROMPT = "Select language / Dil seçin"

# Prompt choice label -> language tag
LANGUAGE_CHOICES = {"English": "en", "Türkçe": "tr"}

EN = StringBundle(
    banner="Die Scan Calc",
    prompts={
        "width_mm": "Object width to cover (mm)",
        "length_mm": "Object length (scan direction) (mm)",
        "dpi": "Target DPI on object",
        "sensor_px": "Sensor pixels (e.g., 4096, 8192)",
        "pixel_pitch_um": "Pixel pitch (µm)",
        "wd_mm": "Working distance WD (mm)",
        "speed_mm_s": "Traverse speed (mm/s)",
        "overlap": "Total overlap fraction (e.g. 0.12 = 12%)",
        "cameras": "Number of cameras (0 = auto-calc)",
    },
    validation={
        "positive_number": "Enter a positive number",
        "positive_integer": "Enter a positive integer",
        "fraction": "Enter 0–1",
        "non_negative": "Enter an integer >= 0",
    },
    tables={
        "inputs_header": "INPUTS",
        "outputs_header": "OUTPUTS",
        "parameter": "Parameter",
        "value": "Value",
        "units": "Units",
        "metric": "Metric",
        "notes": "Notes/Tips",
    },
    input_labels={
        "width_mm": "Object width",
        "length_mm": "Object length (scan)",
        "dpi": "Target DPI",
        "sensor_px": "Sensor pixels",
        "pixel_pitch_um": "Pixel pitch",
        "wd_mm": "Working distance",
        "speed_mm_s": "Traverse speed",
        "overlap": "Overlap (total)",
        "cameras": "Planned cameras",
    },
    output_labels={
        "pixel_size_obj_mm": "Pixel size on object",
        "eq_dpi": "Equivalent DPI",
        "px_needed_across": "Pixels needed across",
        "px_needed_with_margin": "Pixels w/ margin",
        "cams_required": "Cameras required",
        "fov_per_cam_mm": "FOV per camera",
        "sensor_length_mm": "Sensor length",
        "magnification": "Magnification",
        "focal_length_mm": "Lens focal length",
        "line_pitch_mm": "Line pitch",
        "lines_needed": "Lines needed (length)",
        "line_rate_hz": "Line rate needed",
    },
    tips={
        "pixel_size_obj_mm": "Defines the smallest feature you can resolve.",
        "eq_dpi": "Higher is better, but this is fixed by your choice of DPI.",
        "px_needed_across": "Total required resolution for the object width.",
        "px_needed_with_margin": "Accounts for overlap, giving a safety margin.",
        "cams_required": "If this seems too high, consider wider-sensor cameras.",
        "fov_per_cam_mm": "Check for lens distortion at edges.",
        "sensor_length_mm": "Physical size of the camera sensor array.",
        "magnification": "Optical mag. < 0.1 or > 10 can be tricky.",
        "focal_length_mm": "Select a standard lens close to this value.",
        "line_pitch_mm": "Distance object moves per scan line (set by DPI).",
        "lines_needed": "Total scan lines to cover the object length.",
        "line_rate_hz": "Select a camera with at least [bold]2x[/bold] this rate for margin.",
    },
    cancelled="Cancelled.",
)

TR = StringBundle(
    banner="Yüzey Tarama Hesaplayıcı",
    prompts={
        "width_mm": "Taranacak nesne genişliği (mm)",
        "length_mm": "Nesne uzunluğu (tarama yönü) (mm)",
        "dpi": "Nesne üzerindeki hedef DPI",
        "sensor_px": "Sensör pikseli (örn: 4096, 8192)",
        "pixel_pitch_um": "Piksel aralığı (µm)",
        "wd_mm": "Çalışma mesafesi (mm)",
        "speed_mm_s": "Tarama hızı (mm/s)",
        "overlap": "Toplam bindirme oranı (örn: 0.12 = %12)",
        "cameras": "Kamera sayısı (0 = otomatik hesapla)",
    },
    validation={
        "positive_number": "Pozitif bir sayı girin",
        "positive_integer": "Pozitif bir tamsayı girin",
        "fraction": "0–1 arası bir değer girin",
        "non_negative": ">= 0 bir tamsayı girin",
    },
    tables={
        "inputs_header": "GİRDİLER",
        "outputs_header": "ÇIKTILAR",
        "parameter": "Parametre",
        "value": "Değer",
        "units": "Birim",
        "metric": "Metrik",
        "notes": "Notlar/İpuçları",
    },
    input_labels={
        "width_mm": "Nesne genişliği",
        "length_mm": "Nesne uzunluğu (tarama)",
        "dpi": "Hedef DPI",
        "sensor_px": "Sensör pikselleri",
        "pixel_pitch_um": "Piksel aralığı",
        "wd_mm": "Çalışma mesafesi",
        "speed_mm_s": "Tarama hızı",
        "overlap": "Bindirme (toplam)",
        "cameras": "Planlanan kamera sayısı",
    },
    output_labels={
        "pixel_size_obj_mm": "Nesne üzerindeki piksel boyutu",
        "eq_dpi": "Eşdeğer DPI",
        "px_needed_across": "Gereken piksel (genişlik)",
        "px_needed_with_margin": "Gereken piksel (marjlı)",
        "cams_required": "Gereken kamera sayısı",
        "fov_per_cam_mm": "Kamera başına FOV",
        "sensor_length_mm": "Sensör uzunluğu",
        "magnification": "Büyütme oranı",
        "focal_length_mm": "Lens odak uzaklığı",
        "line_pitch_mm": "Satır aralığı",
        "lines_needed": "Gereken satır sayısı (uzunluk)",
        "line_rate_hz": "Gereken satır hızı",
    },
    tips={
        "pixel_size_obj_mm": "Çözebileceğiniz en küçük ayrıntıyı tanımlar.",
        "eq_dpi": "Daha yüksek daha iyidir, ancak bu DPI seçiminizle sabittir.",
        "px_needed_across": "Nesne genişliği için gereken toplam çözünürlük.",
        "px_needed_with_margin": "Bindirmeyi hesaba katarak bir güvenlik payı sağlar.",
        "cams_required": "Bu sayı çok yüksekse, daha geniş sensörlü kameraları düşünün.",
        "fov_per_cam_mm": "Kenarlarda lens bozulmasını kontrol edin.",
        "sensor_length_mm": "Kamera sensör dizisinin fiziksel boyutu.",
        "magnification": "Optik büyütme. < 0.1 veya > 10 olması durumu zorlaştırabilir.",
        "focal_length_mm": "Bu değere yakın standart bir lens seçin.",
        "line_pitch_mm": "Nesnenin taranan satır başına hareket ettiği mesafe (DPI ile ayarlanır).",
        "lines_needed": "Nesne uzunluğunu taramak için gereken toplam satır sayısı.",
        "line_rate_hz": "Güvenlik payı için bu oranın en az [bold]2 katı[/bold] hıza sahip bir kamera seçin.",
    },
    cancelled="İptal edildi.",
)

BUNDLES: Dict[str, StringBundle] = {"en": EN, "tr": TR}


def get_bundle(tag: str) -> StringBundle:
    """
    Select the string bundle for a language tag.

    Raises ConfigurationError for unsupported tags.
    """
    try:
        return BUNDLES[tag.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported language '{tag}' (available: {', '.join(sorted(BUNDLES))})"
        )

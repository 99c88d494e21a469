"""
Localized result texts.

Each successful result message is a one-paragraph summary written by the
handler followed by a "why is this used" explanation taken from here.
"""

from typing import Dict

from ..core.tools import ToolType

WHY_HEADER = "❓ Neden Kullanılır?"

NOT_FOUND = "Analiz fonksiyonu bulunamadı. (Analysis not found)"
INVALID_PARAMS = "Geçersiz parametre (Invalid parameters): {fields}"
SAMPLE_MISSING = "Örnek veri bulunamadı. (Sample feature missing)"
OPERATION_FAILED = "{operation} hesaplanırken hata oluştu. (Operation failed)"

TRUE_TEXT = "TRUE"
FALSE_TEXT = "FALSE"

WHY: Dict[ToolType, str] = {
    ToolType.AREA: (
        "Emlak vergilendirmesi, tarım arazisi rekolte tahmini, yangın sonrası hasar "
        "alanının tespiti veya imar planlarında parsel büyüklüğünü doğrulamak için kullanılır."
    ),
    ToolType.BBOX: (
        "Haritanın ilk açılışında kameranın odaklanacağı alanı belirlemek, çıktı alanını "
        "seçmek veya iki katmanın aynı bölgeye ait olup olmadığını hızlıca kontrol etmek için kullanılır."
    ),
    ToolType.CENTROID: (
        "Karmaşık şekilli bölgelerin etiketlerini ortaya yerleştirmek ve bir poligonu "
        "analizlerde tek bir nokta olarak temsil etmek için kullanılır."
    ),
    ToolType.BEARING: (
        "Navigasyonda gidiş yönünü belirlemek, anten yönlendirmesi yapmak veya "
        "rüzgar ve akıntı yönü analizlerinde kullanılır."
    ),
    ToolType.BUFFER: (
        "Dere yataklarına yapı yasağı bandı koymak, gürültü kaynaklarının etki alanını "
        "belirlemek veya bir mağazanın yürüme mesafesindeki müşterileri bulmak için kullanılır."
    ),
    ToolType.INTERSECT: (
        "Çakışma analizi için: 'Orman arazisi ile maden ruhsat sahası nerede çakışıyor?' "
        "veya 'Hem sel riski taşıyan hem tarım yapılan alanlar hangileri?'."
    ),
    ToolType.UNION: (
        "İdari sınırlar ile parseller gibi farklı kaynakları tek bir kapsama alanında "
        "toplamak için kullanılır."
    ),
    ToolType.DIFFERENCE: (
        "Kullanılabilir alan hesabı için: bir arsadan sulak alan veya sit alanı gibi "
        "yapılaşmaya kapalı kısımları çıkararak net alanı bulmak."
    ),
    ToolType.DISSOLVE: (
        "Veri sadeleştirme için: mahalle sınırlarını birleştirerek ilçe haritası üretmek "
        "veya aynı imar tipindeki adaları tek bölgede toplamak."
    ),
    ToolType.CLIP: (
        "Büyük bir veri setinden yalnızca çalışılan bölgeyi kesip almak ve odak dışındaki "
        "veriyi temizlemek için kullanılır."
    ),
    ToolType.CONVEX_HULL: (
        "Bir olgunun yayıldığı en geniş alanı görmek için: 'Vakaların görüldüğü tüm köyleri "
        "kapsayan karantina sınırı ne olmalı?'"
    ),
    ToolType.SIMPLIFY: (
        "Web haritalarında veri boyutunu küçültüp performansı artırmak için kullanılır; "
        "1000 noktalık bir GPS izi şekli bozulmadan 100 noktaya indirilebilir."
    ),
    ToolType.SPATIAL_JOIN: (
        "İstatistik üretmek için: 'Hangi mahallede kaç eczane var?' veya "
        "'Hangi satış bölgesinde kaç müşteri yaşıyor?'."
    ),
    ToolType.NEAREST: (
        "Acil durum ve lojistik için: 'Kaza yerine en yakın ambulans hangisi?' veya "
        "'Müşteriye en yakın şube nerede?'."
    ),
    ToolType.DISTANCE_MATRIX: (
        "Ağ optimizasyonu için: 'Hangi depolar birbirine transfer yapabilecek kadar yakın?'."
    ),
    ToolType.VORONOI: (
        "Hizmet bölgesi belirlemek için: itfaiye istasyonlarının sorumluluk sahalarını "
        "en yakın istasyona göre ayırmak."
    ),
    ToolType.TIN: (
        "Arazi modellemesi için: yükseklik noktalarından yüzey veya eğim haritası "
        "oluşturmanın temelidir."
    ),
    ToolType.KMEANS: (
        "Segmentasyon için: müşterileri coğrafi olarak gruplayıp ekiplere dağıtmak veya "
        "depo yerlerini belirlemek."
    ),
    ToolType.DBSCAN: (
        "Sıcak nokta tespiti için: suçların veya trafik kazalarının yoğunlaştığı "
        "bölgeleri aykırı değerlerden ayırarak bulmak."
    ),
    ToolType.LINE_INTERSECT: (
        "Altyapı yönetimi için: boru hatlarının çakıştığı yerleri veya trafik ışığı "
        "gereken kavşakları bulmak."
    ),
    ToolType.BEZIER: (
        "Seyrek GPS verisiyle çizilmiş köşeli bir rotayı haritada yumuşak bir çizgiye "
        "dönüştürmek için kullanılır."
    ),
    ToolType.LENGTH: (
        "Metraj hesabı için: döşenecek asfalt veya çekilecek kablo uzunluğunu bulmak."
    ),
    ToolType.LINE_CHUNK: (
        "Bakım planlaması için: uzun bir otoyolu veya boru hattını eşit kontrol "
        "segmentlerine ayırmak."
    ),
    ToolType.LINE_OFFSET: (
        "Koridor analizi için: mevcut bir hattın yanına paralel yeni bir hat planlamak."
    ),
    ToolType.SNAP: (
        "GPS hatalarını düzeltmek için: yolun dışına kaymış araç konumlarını yolun "
        "üzerine oturtmak."
    ),
    ToolType.BASE_STATION_COVERAGE: (
        "Telekomünikasyon planlamasında istasyonların toplam kapsamasını ve sinyal "
        "kalitesini haritalamak, kör noktaları bulmak için kullanılır."
    ),
    ToolType.HEXBIN: (
        "Üst üste binen binlerce noktayı okunur hale getirip hangi bölgenin daha yoğun "
        "olduğunu göstermek için kullanılır."
    ),
    ToolType.ISOBANDS: (
        "Sıcaklık, yağış, hava kirliliği veya emlak fiyatı haritaları oluşturmak için kullanılır."
    ),
    ToolType.IDW: (
        "Yalnızca istasyonlarda ölçülen bir değeri tüm şehre yayarak kesintisiz bir yüzey "
        "elde etmek için kullanılır."
    ),
    ToolType.POINT_GRID: (
        "Veriyi standartlaştırmak veya saha taraması için örnekleme noktaları üretmek."
    ),
    ToolType.SQUARE_GRID: (
        "Arama kurtarma ekiplerine taranacak kareleri atamak gibi sistematik bölümlemeler için."
    ),
    ToolType.TRIANGLE_GRID: (
        "Alanı eşit üçgen hücrelere bölerek örnekleme ve özetleme yapmak için."
    ),
    ToolType.HEX_GRID: (
        "Komşuluk ilişkisi düzenli olan bal peteği hücrelerinde özetleme yapmak için."
    ),
    ToolType.SECTOR: (
        "Kamera veya anten kapsama analizi için: bir güvenlik kamerasının kör noktalarını belirlemek."
    ),
    ToolType.ELLIPSE: (
        "Suç veya kaza gibi olayların hangi yönde yayıldığını görselleştirmek için."
    ),
    ToolType.RANDOM_POINT: (
        "Algoritmaları test etmek veya rastgele olay senaryoları oluşturmak için."
    ),
    ToolType.RANDOM_LINE: (
        "Ağ algoritmalarını rastgele çizgilerle test etmek için."
    ),
    ToolType.RANDOM_POLYGON: (
        "Parsel işlemlerini rastgele poligonlarla test etmek için."
    ),
    ToolType.POLYGON_TO_LINE: (
        "Sınır analizi için: ülke sınırının uzunluğunu ölçmek veya parsel çevresine çit planlamak."
    ),
    ToolType.LINE_TO_POLYGON: (
        "Yürüyerek alınan GPS sınır izini alan verisine dönüştürmek için."
    ),
}

TOPOLOGY_WHY = (
    "Otomatik veri doğrulama ve sorgulama için: 'Bu parsel sit alanı içinde mi?' veya "
    "'Yeni yol dere yatağını kesiyor mu?'."
)


def explain(tool: ToolType, summary: str) -> str:
    """Append the tool's usage explanation to a result summary."""
    why = WHY.get(tool, TOPOLOGY_WHY)
    return f"{summary}\n\n{WHY_HEADER}\n{why}"


def boolean_text(value: bool) -> str:
    return TRUE_TEXT if value else FALSE_TEXT


def boolean_sentence(value: bool) -> str:
    return "EVET (TRUE)" if value else "HAYIR (FALSE)"

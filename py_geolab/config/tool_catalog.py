"""
Tool catalog shown by the presentation layer.

Labels and category titles are bilingual (Turkish with the English term in
parentheses), matching the result messages.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.tools import ToolCategory, ToolType


class ToolDefinition(BaseModel):
    """Sidebar entry for one tool."""

    model_config = ConfigDict(frozen=True)

    id: ToolType = Field(description="Tool identifier")
    label: str = Field(description="Display label")
    category: ToolCategory = Field(description="Dispatch category")
    category_title: str = Field(description="Sidebar group title")
    description: str = Field(description="One-line description")
    requires_params: bool = Field(default=False, description="Show parameter inputs")


CATEGORY_TITLES: Dict[ToolCategory, str] = {
    ToolCategory.GEOMETRIC_MEASUREMENT: "Geometrik & Ölçüm (Geometry)",
    ToolCategory.VECTOR_SET_OPERATIONS: "Vektör İşlemleri (Vector Ops)",
    ToolCategory.SPATIAL_RELATIONSHIP: "Mekansal Analiz (Spatial Analysis)",
    ToolCategory.NETWORK_LINE: "Ağ Analizi (Network)",
    ToolCategory.DENSITY_GRID: "Grid & Yoğunluk (Grid & Density)",
    ToolCategory.DATA_GENERATION: "Veri Üretimi (Data Gen)",
    ToolCategory.BOOLEAN_TOPOLOGY: "Topolojik Sorgular (Topology)",
    ToolCategory.FORMAT_TRANSFORM: "Veri Dönüşümü (Conversion)",
}

# (tool, category, label, description, requires_params)
_ENTRIES = [
    (ToolType.AREA, ToolCategory.GEOMETRIC_MEASUREMENT, "Alan Hesapla (Calculate Area)",
     "Arazi ve parsel planlaması için m² veya km² hesaplar.", False),
    (ToolType.BBOX, ToolCategory.GEOMETRIC_MEASUREMENT, "Sınırlayıcı Kutu (Bounding Box)",
     "Verinin kapladığı en geniş coğrafi sınırları bulur.", False),
    (ToolType.CENTROID, ToolCategory.GEOMETRIC_MEASUREMENT, "Merkez Noktalar (Centroids)",
     "Şekillerin ağırlık merkezini bulur, etiket yerleşimi için uygundur.", False),
    (ToolType.BEARING, ToolCategory.GEOMETRIC_MEASUREMENT, "Açı / Azimut (Bearing)",
     "İki nokta arasındaki pusula yönünü derece olarak verir.", False),

    (ToolType.BUFFER, ToolCategory.VECTOR_SET_OPERATIONS, "Tampon Bölge (Buffer)",
     "Nesnelerin çevresinde etki alanı oluşturur.", True),
    (ToolType.INTERSECT, ToolCategory.VECTOR_SET_OPERATIONS, "Kesişim (Intersect)",
     "İki alanın yalnızca çakışan kısmını alır.", False),
    (ToolType.UNION, ToolCategory.VECTOR_SET_OPERATIONS, "Birleşim (Union)",
     "Farklı bölgeleri tek bir sınır altında toplar.", False),
    (ToolType.DIFFERENCE, ToolCategory.VECTOR_SET_OPERATIONS, "Fark (Difference)",
     "Bir alandan diğerini çıkarır (A eksi B).", False),
    (ToolType.DISSOLVE, ToolCategory.VECTOR_SET_OPERATIONS, "Bütünleştir (Dissolve)",
     "Aynı tipteki bölgelerin iç sınırlarını kaldırır.", False),
    (ToolType.CLIP, ToolCategory.VECTOR_SET_OPERATIONS, "Kırpma (Clip)",
     "Veriyi bir maske çerçevesiyle keser.", False),
    (ToolType.CONVEX_HULL, ToolCategory.VECTOR_SET_OPERATIONS, "Dış Bükey Örtü (Convex Hull)",
     "Dağınık noktaları saran en küçük dışbükey poligonu çizer.", False),
    (ToolType.SIMPLIFY, ToolCategory.VECTOR_SET_OPERATIONS, "Basitleştir (Simplify)",
     "Karmaşık geometrilerin köşe sayısını azaltır.", True),

    (ToolType.SPATIAL_JOIN, ToolCategory.SPATIAL_RELATIONSHIP, "Mekansal Birleşim (Spatial Join)",
     "Her poligonun içinde kaç nokta olduğunu sayar.", False),
    (ToolType.NEAREST, ToolCategory.SPATIAL_RELATIONSHIP, "En Yakın Nokta (Nearest Point)",
     "Referans konuma en yakın hizmet noktasını bulur.", False),
    (ToolType.DISTANCE_MATRIX, ToolCategory.SPATIAL_RELATIONSHIP, "Mesafe Matrisi (Dist Matrix)",
     "Tüm nokta çiftleri arasındaki mesafeleri inceler.", True),
    (ToolType.VORONOI, ToolCategory.SPATIAL_RELATIONSHIP, "Voronoi Bölgeleri (Voronoi)",
     "Her noktanın hakimiyet alanını haritalar.", False),
    (ToolType.TIN, ToolCategory.SPATIAL_RELATIONSHIP, "Üçgen Ağı (TIN)",
     "Noktalardan yüzey modeli için üçgen ağ örer.", False),
    (ToolType.KMEANS, ToolCategory.SPATIAL_RELATIONSHIP, "K-Means Kümeleme (Clustering)",
     "Yakın konumdaki noktaları sabit sayıda gruba ayırır.", True),
    (ToolType.DBSCAN, ToolCategory.SPATIAL_RELATIONSHIP, "DBSCAN Kümeleme",
     "Gürültüyü ayıklayarak yoğunluk kümelerini bulur.", True),

    (ToolType.LINE_INTERSECT, ToolCategory.NETWORK_LINE, "Yol Kesişimleri (Intersections)",
     "Yolların kesiştiği kavşak noktalarını bulur.", False),
    (ToolType.BEZIER, ToolCategory.NETWORK_LINE, "Eğri Yumuşatma (Bezier Spline)",
     "Köşeli çizgileri akıcı eğrilere dönüştürür.", True),
    (ToolType.LENGTH, ToolCategory.NETWORK_LINE, "Çizgi Uzunluğu (Line Length)",
     "Yol ve hatların toplam uzunluğunu ölçer.", False),
    (ToolType.LINE_CHUNK, ToolCategory.NETWORK_LINE, "Parçalara Böl (Line Chunk)",
     "Uzun hatları sabit km aralıklarla segmentlere ayırır.", True),
    (ToolType.LINE_OFFSET, ToolCategory.NETWORK_LINE, "Ofset (Line Offset)",
     "Mevcut hatta paralel yeni bir şerit oluşturur.", True),
    (ToolType.SNAP, ToolCategory.NETWORK_LINE, "Çizgiye Yapıştırma (Snap)",
     "Sapmış GPS noktalarını en yakın yola hizalar.", True),
    (ToolType.BASE_STATION_COVERAGE, ToolCategory.NETWORK_LINE, "Baz İstasyonu Kapsama (Coverage)",
     "2G/3G/4G/5G bantları için iç içe kapsama halkaları çizer.", True),

    (ToolType.HEXBIN, ToolCategory.DENSITY_GRID, "Altıgen Yoğunluk (Hexbin)",
     "Noktaları altıgen hücrelerde sayarak yoğunluğu gösterir.", True),
    (ToolType.ISOBANDS, ToolCategory.DENSITY_GRID, "Eş Değer Bölgeleri (Isobands)",
     "Noktasal değerlerden eş değer kuşakları üretir.", True),
    (ToolType.IDW, ToolCategory.DENSITY_GRID, "Enterpolasyon (IDW)",
     "Örnek noktalardan tahmini yüzey haritası üretir.", True),
    (ToolType.POINT_GRID, ToolCategory.DENSITY_GRID, "Nokta Grid (Point Grid)",
     "Sahayı düzenli aralıklı noktalarla tarar.", True),
    (ToolType.SQUARE_GRID, ToolCategory.DENSITY_GRID, "Kare Grid (Square Grid)",
     "Alanı eşit kare hücrelere böler.", True),
    (ToolType.TRIANGLE_GRID, ToolCategory.DENSITY_GRID, "Üçgen Grid (Triangle Grid)",
     "Alanı üçgen hücrelere böler.", True),
    (ToolType.HEX_GRID, ToolCategory.DENSITY_GRID, "Altıgen Grid (Hex Grid)",
     "Alanı bal peteği hücrelerine böler.", True),

    (ToolType.SECTOR, ToolCategory.DATA_GENERATION, "Sektör (Sector)",
     "Kamera veya radar görüş açısını temsil eden dilim çizer.", True),
    (ToolType.ELLIPSE, ToolCategory.DATA_GENERATION, "Elips (Ellipse)",
     "Yönlü dağılımı göstermek için elips çizer.", True),
    (ToolType.RANDOM_POINT, ToolCategory.DATA_GENERATION, "Rastgele Nokta (Random Pt)",
     "Simülasyon için rastgele nokta üretir.", True),
    (ToolType.RANDOM_LINE, ToolCategory.DATA_GENERATION, "Rastgele Çizgi (Random Line)",
     "Test amaçlı rastgele çizgiler üretir.", True),
    (ToolType.RANDOM_POLYGON, ToolCategory.DATA_GENERATION, "Rastgele Poligon (Random Poly)",
     "Test amaçlı rastgele parseller üretir.", True),

    (ToolType.BOOL_POINT_IN_POLY, ToolCategory.BOOLEAN_TOPOLOGY, "Nokta İçinde mi? (PointInPoly)",
     "Konumun bir bölgenin içinde olup olmadığını sorgular.", False),
    (ToolType.BOOL_CONTAINS, ToolCategory.BOOLEAN_TOPOLOGY, "Kapsıyor mu? (Contains)",
     "Bir alanın diğerini tamamen içerip içermediğine bakar.", False),
    (ToolType.BOOL_CROSSES, ToolCategory.BOOLEAN_TOPOLOGY, "Kesiyor mu? (Crosses)",
     "Çizgisel bir varlığın alanı kesip kesmediğine bakar.", False),
    (ToolType.BOOL_DISJOINT, ToolCategory.BOOLEAN_TOPOLOGY, "Ayrık mı? (Disjoint)",
     "İki nesnenin hiç temas etmediğini doğrular.", False),
    (ToolType.BOOL_OVERLAP, ToolCategory.BOOLEAN_TOPOLOGY, "Örtüşüyor mu? (Overlap)",
     "İki alanın kısmen üst üste binip binmediğine bakar.", False),
    (ToolType.BOOL_EQUAL, ToolCategory.BOOLEAN_TOPOLOGY, "Eşit mi? (Equal)",
     "İki geometrinin mekansal olarak aynı olup olmadığına bakar.", False),
    (ToolType.BOOL_TOUCH, ToolCategory.BOOLEAN_TOPOLOGY, "Temas Ediyor mu? (Touch)",
     "Yalnızca sınır komşuluğu olup olmadığına bakar.", False),
    (ToolType.BOOL_INTERSECTS, ToolCategory.BOOLEAN_TOPOLOGY, "Kesişiyor mu? (Intersects)",
     "Nesneler arasında herhangi bir temas olup olmadığına bakar.", False),

    (ToolType.POLYGON_TO_LINE, ToolCategory.FORMAT_TRANSFORM, "Poligondan Çizgiye (Poly To Line)",
     "Alan sınırını çizgi verisine çevirir.", False),
    (ToolType.LINE_TO_POLYGON, ToolCategory.FORMAT_TRANSFORM, "Çizgiden Poligona (Line To Poly)",
     "Kapalı çizgiyi doldurulabilir alana çevirir.", False),
]

TOOL_DEFINITIONS: Dict[ToolType, ToolDefinition] = {
    tool: ToolDefinition(
        id=tool,
        label=label,
        category=category,
        category_title=CATEGORY_TITLES[category],
        description=description,
        requires_params=requires_params,
    )
    for tool, category, label, description, requires_params in _ENTRIES
}


def get_tool_definition(tool: ToolType) -> ToolDefinition:
    """
    Get the catalog entry of a tool.

    Args:
        tool: Tool identifier or its string value

    Returns:
        ToolDefinition for the tool
    """
    return TOOL_DEFINITIONS[ToolType.parse(tool)]


def list_tools(category: Optional[ToolCategory] = None) -> List[ToolDefinition]:
    """List catalog entries in sidebar order, optionally for one category."""
    return [
        definition
        for definition in TOOL_DEFINITIONS.values()
        if category is None or definition.category == category
    ]

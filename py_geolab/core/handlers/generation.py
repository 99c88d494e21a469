"""Shape and random data generation."""

from typing import Dict

from shapely.geometry import Point

from ...config import messages
from .. import generators, geometry
from ..context import AnalysisContext, Handler
from ..features import Feature
from ..results import AnalysisResult
from ..tools import ToolType

CENTER = Point(-74.00, 40.72)


def sector(ctx: AnalysisContext) -> AnalysisResult:
    params = ctx.params
    shape = generators.sector(CENTER, params.radius, params.bearing1, params.bearing2)
    message = messages.explain(
        ctx.tool, "Sektör: Belirli bir açı ve yarıçapa sahip dairesel dilim oluşturuldu."
    )
    return AnalysisResult.of([Feature.create(shape, label="Görüş Açısı"), Feature.create(CENTER)], message)


def ellipse(ctx: AnalysisContext) -> AnalysisResult:
    params = ctx.params
    shape = generators.ellipse(CENTER, params.x_semi_axis, params.y_semi_axis)
    message = messages.explain(ctx.tool, "Elips: Yönlü dağılımı gösteren eliptik şekil oluşturuldu.")
    return AnalysisResult.of([Feature.create(shape, label="Elips"), Feature.create(CENTER)], message)


def _random_handler(generate) -> Handler:
    def handle(ctx: AnalysisContext) -> AnalysisResult:
        bounds = geometry.bounds_of(ctx.polygons.geometries())
        if bounds is None:
            return AnalysisResult.failure(messages.SAMPLE_MISSING)

        count = ctx.params.count
        features = [Feature.create(shape) for shape in generate(count, bounds)]
        message = messages.explain(ctx.tool, f"Rastgele Veri: {count} adet rastgele özellik üretildi.")
        return AnalysisResult.of(features, message, {"Adet (Count)": len(features)})

    return handle


HANDLERS: Dict[ToolType, Handler] = {
    ToolType.SECTOR: sector,
    ToolType.ELLIPSE: ellipse,
    ToolType.RANDOM_POINT: _random_handler(generators.random_points),
    ToolType.RANDOM_LINE: _random_handler(generators.random_lines),
    ToolType.RANDOM_POLYGON: _random_handler(generators.random_polygons),
}

"""TensorSight structure tensor engine."""

from tensorsight.engine.config import EngineConfig
from tensorsight.engine.eigen import EigenPair, EigenResult, eigen_symmetric_2x2
from tensorsight.engine.errors import InvalidImage, InvalidParameter, TensorSightError
from tensorsight.engine.image import ImageHandle, load_image
from tensorsight.engine.kernel import KernelCache, KernelHandle, build_kernel, set_kernel_params
from tensorsight.engine.query import query_structure_tensor
from tensorsight.engine.session import TensorProbe
from tensorsight.engine.tensor import StructureTensor, build_structure_tensor

__all__ = [
    "EngineConfig",
    "EigenPair",
    "EigenResult",
    "eigen_symmetric_2x2",
    "InvalidImage",
    "InvalidParameter",
    "TensorSightError",
    "ImageHandle",
    "load_image",
    "KernelCache",
    "KernelHandle",
    "build_kernel",
    "set_kernel_params",
    "query_structure_tensor",
    "TensorProbe",
    "StructureTensor",
    "build_structure_tensor",
]

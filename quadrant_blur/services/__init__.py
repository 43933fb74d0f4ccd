from .geometry_service import GeometryService
from .image_service import ImageService
from .seam_blur_service import SeamBlurService

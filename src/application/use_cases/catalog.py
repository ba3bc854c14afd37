"""
Catalog Use Cases

Creates products through the builder selected by the catalog configuration.
"""

from dataclasses import dataclass, field

from src.domain.entities.product import LenientProductBuilder, Product, ProductBuilder
from src.domain.exceptions import DomainException

from .base import UseCase, UseCaseRequest, UseCaseResponse


@dataclass(kw_only=True)
class CreateProductRequest(UseCaseRequest):
    """Request to create a catalog product."""

    name: str | None
    price: int
    desc: str | None = None
    brand: str | None = None
    category: str | None = None
    discount: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    images: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class CreateProductResponse(UseCaseResponse):
    """Response with the created product."""

    product: Product | None = None


class CreateProductUseCase(UseCase[CreateProductRequest, CreateProductResponse]):
    """
    Builds a product from request fields.

    With strict validation the ``ProductBuilder`` rules apply and violations
    come back as error responses; otherwise the lenient builder accepts the
    fields unchanged.
    """

    response_type = CreateProductResponse

    def __init__(self, strict_validation: bool = True) -> None:
        super().__init__("CreateProductUseCase")
        self.strict_validation = strict_validation

    def validate(self, request: CreateProductRequest) -> str | None:
        if request.images and any(not image for image in request.images):
            return "Image filenames cannot be empty"
        return None

    def process(self, request: CreateProductRequest) -> CreateProductResponse:
        builder: ProductBuilder | LenientProductBuilder = (
            ProductBuilder() if self.strict_validation else LenientProductBuilder()
        )

        try:
            product = (
                builder.set_name(request.name)
                .set_desc(request.desc)
                .set_price(request.price)
                .set_brand(request.brand)
                .set_category(request.category)
                .set_discount(request.discount)
                .set_created_at(request.created_at)
                .set_updated_at(request.updated_at)
                .set_images(request.images)
                .build()
            )
        except DomainException as e:
            self.logger.warning(
                f"Product rejected: {e}",
                extra={"request_id": str(request.request_id), **e.details},
            )
            return CreateProductResponse.error_response(str(e), request.request_id)

        self.logger.info("Product created successfully.", extra={"product_name": product.name})
        return CreateProductResponse.success_response(
            product.to_dict(), request.request_id, product=product
        )

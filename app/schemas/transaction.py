"""Transaction Document Schema — the business envelope relayed to the backend procedure.

Invariants:
    - 12 required fields (identifiers, references, URLs, three timestamps)
    - urlAdjunto and correo are optional; null counts as absent
    - Wire names are camelCase (alias_generator); unknown fields are ignored
      here and still relayed, because the route forwards the raw body
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, EmailStr, StrictStr
from pydantic.alias_generators import to_camel

from app.schemas.common import INVALID_EMAIL, NonEmptyText, Timestamp

TEXT_FIELDS = (
    "idDocumento", "tipoDocumento", "uuid", "rucProveedor", "rucReceptor",
    "ordenCompra", "urlDocumento", "urlXml", "urlPdf",
)
TIMESTAMP_FIELDS = ("fechaDocumento", "fechaCreacion", "fechaEntrega")


class TransactionDocument(BaseModel):
    """Document accepted by POST /transaccion."""
    model_config = ConfigDict(alias_generator=to_camel)

    field_messages: ClassVar[dict[str, str]] = {
        **{name: f"{name} es obligatorio" for name in TEXT_FIELDS},
        **{name: f"{name} debe ser numérico" for name in TIMESTAMP_FIELDS},
        "urlAdjunto": "urlAdjunto debe ser texto",
        "correo": INVALID_EMAIL,
    }

    id_documento: NonEmptyText
    tipo_documento: NonEmptyText
    uuid: NonEmptyText
    ruc_proveedor: NonEmptyText
    ruc_receptor: NonEmptyText
    fecha_documento: Timestamp
    fecha_creacion: Timestamp
    orden_compra: NonEmptyText
    url_documento: NonEmptyText
    url_xml: NonEmptyText
    url_pdf: NonEmptyText
    fecha_entrega: Timestamp
    url_adjunto: StrictStr | None = None
    correo: EmailStr | None = None

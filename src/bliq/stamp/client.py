"""Cliente del servicio de timbrado y cancelación de CFDI.

Todas las operaciones son POST con cuerpo JSON. Las que requieren
certificado aceptan una sola fuente de credencial por llamada:
`Certificado` (archivos) o `RegisteredCertificate` (número + RFC).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bliq.api.connectors.errors import ApplicationError
from bliq.api.connectors.executor import RequestExecutor
from bliq.api.connectors.profiles import STAMP_PROFILE, ServiceProfile
from bliq.api.payload_builders.stamp import (
    COMPROBANTE_KEY,
    build_cancel_payload,
    build_certificate_upload_payload,
    build_comprobante_payload,
    build_pdf_payload,
    build_status_payload,
)
from bliq.config.settings import mode_from_flag
from bliq.domain.cancel_version import CancelApiVersion
from bliq.stamp.results import (
    CancelResult,
    CreateCfdiResult,
    CreatePdfResult,
    FetchCfdiResult,
    StatusCfdiResult,
    cancel_result_for,
)

if TYPE_CHECKING:
    from bliq.config.settings import ApiMode
    from bliq.domain.certificado import Certificado, CredentialSource
    from bliq.protocols.http_transport import HttpTransportProtocol

UNSPECIFIED_ERROR_MESSAGE = "Error no especificado"


class StampClient:
    """Crea, timbra, consulta y cancela CFDI.

    Args:
        token: Token de acceso a la API.
        dev_mode: Si es True las peticiones van con `mode=dev`.
        transport: Colaborador HTTP opcional (por defecto httpx).
        profile: Perfil del servicio. `LEGACY_STAMP_PROFILE` evalúa el éxito
            por código HTTP en lugar del campo `success`.

    Raises:
        ConfigurationError: Si el token está vacío.
    """

    def __init__(
        self,
        token: str,
        dev_mode: bool = False,
        *,
        transport: HttpTransportProtocol | None = None,
        profile: ServiceProfile = STAMP_PROFILE,
    ) -> None:
        self._executor = RequestExecutor(profile, token, mode_from_flag(dev_mode), transport)

    @property
    def mode(self) -> ApiMode:
        return self._executor.mode

    def create_xml(self, data: dict[str, Any]) -> Any:
        """Crea el XML de un CFDI a partir del payload completo.

        Returns:
            El campo `data` del envelope, sin envolver.
        """
        response = self._executor.post("crear_xml", data)
        return response.get("data")

    def create_xml_with_credential(
        self,
        comprobante: dict[str, Any],
        credential: CredentialSource,
    ) -> Any:
        """Crea el XML sellado de un CFDI con la credencial indicada."""
        response = self._executor.post(
            "crear_xml",
            build_comprobante_payload(comprobante, credential),
        )
        return response.get("data")

    def create_cfdi(
        self,
        comprobante: dict[str, Any],
        credential: CredentialSource,
    ) -> CreateCfdiResult:
        """Crea y timbra un CFDI."""
        response = self._executor.post(
            "crear_cfdi",
            build_comprobante_payload(comprobante, credential),
        )
        return CreateCfdiResult(response)

    def create_pdf_by_uuid(
        self,
        uuid: str,
        params: dict[str, Any] | None = None,
    ) -> CreatePdfResult:
        return self._create_pdf("uuid", uuid, params)

    def create_pdf_by_xml(
        self,
        xml: str,
        params: dict[str, Any] | None = None,
    ) -> CreatePdfResult:
        return self._create_pdf("xml", xml, params)

    def create_pdf_by_data(
        self,
        comprobante: dict[str, Any],
        params: dict[str, Any] | None = None,
    ) -> CreatePdfResult:
        """Genera el PDF a partir de los datos del comprobante, sin timbrar."""
        return self._create_pdf(COMPROBANTE_KEY, comprobante, params)

    def _create_pdf(
        self,
        key: str,
        value: Any,
        params: dict[str, Any] | None,
    ) -> CreatePdfResult:
        response = self._executor.post("crear_pdf", build_pdf_payload(key, value, params))
        return CreatePdfResult(response)

    def fetch_cfdi(self, uuid: str) -> FetchCfdiResult:
        """Recupera el XML de un CFDI timbrado."""
        response = self._executor.post("recuperar_cfdi", {"uuid": uuid})
        return FetchCfdiResult(response)

    def cancel_cfdi(
        self,
        uuid: str,
        motivo: str,
        folio_sustitucion: str,
        credential: CredentialSource,
        *,
        version: CancelApiVersion = CancelApiVersion.V1,
        rfc_receptor: str | None = None,
        total: str | None = None,
    ) -> CancelResult:
        """Solicita la cancelación de un CFDI.

        Args:
            uuid: UUID del CFDI.
            motivo: Clave de motivo de cancelación (01-04).
            folio_sustitucion: UUID que sustituye al cancelado (motivo 01).
            credential: Certificado en archivos o certificado registrado.
            version: Versión del endpoint; define la forma del resultado.
            rfc_receptor: Requerido en V3.
            total: Requerido en V3.

        Returns:
            `CancelCfdiResult`, `CancelCfdiResultV2` o `CancelCfdiResultV3`
            según `version`.

        Raises:
            ConfigurationError: Si es V3 y falta `rfc_receptor` o `total`.
        """
        version = CancelApiVersion(version)
        payload = build_cancel_payload(
            version,
            uuid,
            motivo,
            folio_sustitucion,
            credential,
            rfc_receptor=rfc_receptor,
            total=total,
        )
        response = self._executor.post(version.endpoint, payload)
        return cancel_result_for(version, response)

    def status_cfdi(
        self,
        uuid: str,
        rfc_emisor: str,
        rfc_receptor: str,
        total: str,
    ) -> StatusCfdiResult:
        """Consulta el estatus de un CFDI ante el SAT."""
        response = self._executor.post(
            "estatus_cfdi",
            build_status_payload(uuid, rfc_emisor, rfc_receptor, total),
        )
        return StatusCfdiResult(response)

    def sign_manifest(self, certificado: Certificado) -> None:
        """Firma el manifiesto con el certificado del contribuyente."""
        self._post_acknowledged(
            "firmar_manifiesto",
            build_certificate_upload_payload(certificado),
        )

    def register_certificate(self, certificado: Certificado) -> None:
        """Registra un certificado para usarlo después por número + RFC."""
        self._post_acknowledged(
            "certificado_registrar",
            build_certificate_upload_payload(certificado),
        )

    def register_rfc(self, rfc: str) -> None:
        """Registra un RFC para timbrado."""
        self._post_acknowledged("registrar_rfc", {"rfc": rfc})

    def _post_acknowledged(self, endpoint: str, payload: dict[str, Any]) -> None:
        response = self._executor.post(endpoint, payload)
        if not response.get("success"):
            raise ApplicationError(
                response.get("message") or UNSPECIFIED_ERROR_MESSAGE,
                response_body=response,
            )

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._executor.get(endpoint, params)

    def post(self, endpoint: str, data: Any = None) -> dict[str, Any]:
        return self._executor.post(endpoint, data)

"""DTOs de entrada e seus schemas de validação.

Os modelos pydantic são os registros tipados entregues em Accepted.value.
Usam strict=True para não coagir valores: a validação semântica é feita
pelas regras do schema, o modelo apenas estreita o tipo. Senhas ficam
fora de model_dump.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.validation.rules import FieldRule, RuleKind
from app.validation.schema import DtoSchema, define_schema

_DTO_CONFIG = ConfigDict(strict=True, frozen=True, populate_by_name=True, extra="ignore")


class UpdateUserAvatarDto(BaseModel):
    """Atualização do avatar de um usuário."""

    model_config = _DTO_CONFIG

    user_id: str = Field(alias="userId")
    avatar: str


class CreateServiceDto(BaseModel):
    """Criação de serviço do catálogo."""

    model_config = _DTO_CONFIG

    name: str
    duration_minutes: int | float = Field(alias="durationMinutes")
    price: int | float


class UpdateServiceDto(BaseModel):
    """Atualização de serviço, com profissionais vinculados opcionais."""

    model_config = _DTO_CONFIG

    id: str
    name: str
    duration_minutes: int | float = Field(alias="durationMinutes")
    price: int | float
    professionals_ids: list[str] | None = Field(default=None, alias="professionalsIds")


class CreateSecretaryProfessionalDto(BaseModel):
    """Vínculo secretária ↔ profissional."""

    model_config = _DTO_CONFIG

    secretary_id: str = Field(alias="secretaryId")
    professional_id: str = Field(alias="professionalId")
    is_active: bool = Field(alias="isActive")


class CreateUserDto(BaseModel):
    """Cadastro de usuário (profissional, secretária ou administrador)."""

    model_config = _DTO_CONFIG

    role_id: str = Field(alias="roleId")
    full_name: str = Field(alias="fullName")
    email: str
    password: str = Field(exclude=True, repr=False)
    bio: str


class UpdateUserDto(BaseModel):
    model_config = _DTO_CONFIG

    user_id: str = Field(alias="userId")
    email: str
    password: str = Field(exclude=True, repr=False)


class CreateCompanyDto(BaseModel):
    """Cadastro da empresa (clínica, salão etc.) e seu endereço."""

    model_config = _DTO_CONFIG

    id: str
    name: str
    company_type: str = Field(alias="companyType")
    address: str
    city: str
    state: str
    postal_code: str = Field(alias="postalCode")
    country: str
    description: str | None = None


class UpdateAppointmentStatusDto(BaseModel):
    model_config = _DTO_CONFIG

    appointment_id: str = Field(alias="appointmentId")
    status: str


class PaymentDto(BaseModel):
    """Registro de pagamento de assinatura.

    Apenas o formato do contrato; não há regras de validação ativas.
    `payment_method` usual: card|cash|transfer. `status` usual:
    completed|pending|failed. Outros valores são aceitos.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subscription_id: str = Field(alias="subscriptionId")
    amount: float
    payment_date: str = Field(alias="paymentDate", description="Data ISO-8601")
    payment_method: str = Field(alias="paymentMethod")
    status: str


def _password_rules() -> list[FieldRule]:
    return [
        FieldRule("password", RuleKind.STRING, "A senha deve ser um texto"),
        FieldRule("password", RuleKind.MIN_LENGTH, "A senha deve ter pelo menos 8 caracteres", limit=8),
        FieldRule("password", RuleKind.MAX_LENGTH, "A senha não deve ultrapassar 50 caracteres", limit=50),
    ]


UPDATE_USER_AVATAR: DtoSchema = define_schema(
    "user-avatar-update",
    UpdateUserAvatarDto,
    [
        FieldRule("userId", RuleKind.UUID4, "O ID do usuário deve ser um UUID válido"),
        FieldRule("avatar", RuleKind.STRING, "O avatar deve ser uma URL válida"),
        FieldRule("avatar", RuleKind.URL, "O avatar deve ser uma URL válida"),
    ],
)

CREATE_SERVICE: DtoSchema = define_schema(
    "service-create",
    CreateServiceDto,
    [
        FieldRule("name", RuleKind.STRING, "O nome deve ser um texto"),
        FieldRule("name", RuleKind.PRESENCE, "O nome é obrigatório"),
        FieldRule("durationMinutes", RuleKind.NUMBER, "A duração deve ser um número"),
        FieldRule("durationMinutes", RuleKind.NON_NEGATIVE, "A duração não pode ser negativa"),
        FieldRule("price", RuleKind.NUMBER, "O preço deve ser um número"),
        FieldRule("price", RuleKind.NON_NEGATIVE, "O preço não pode ser negativo"),
    ],
)

UPDATE_SERVICE: DtoSchema = define_schema(
    "service-update",
    UpdateServiceDto,
    [
        FieldRule("id", RuleKind.STRING, "O ID do serviço deve ser um texto"),
        FieldRule("name", RuleKind.STRING, "O nome deve ser um texto"),
        FieldRule("durationMinutes", RuleKind.NUMBER, "A duração deve ser um número"),
        FieldRule("price", RuleKind.NUMBER, "O preço deve ser um número"),
        FieldRule(
            "professionalsIds",
            RuleKind.STRING_LIST,
            "Os profissionais devem ser uma lista de IDs",
            optional=True,
        ),
    ],
)

CREATE_SECRETARY_PROFESSIONAL: DtoSchema = define_schema(
    "secretary-professional-create",
    CreateSecretaryProfessionalDto,
    [
        FieldRule("secretaryId", RuleKind.UUID4, "O ID da secretária deve ser um UUID válido"),
        FieldRule("professionalId", RuleKind.UUID4, "O ID do profissional deve ser um UUID válido"),
        FieldRule("isActive", RuleKind.BOOLEAN, "O estado deve ser um valor booleano"),
    ],
)

CREATE_USER: DtoSchema = define_schema(
    "user-create",
    CreateUserDto,
    [
        FieldRule("roleId", RuleKind.UUID4, "O ID do papel deve ser um UUID válido"),
        FieldRule("fullName", RuleKind.STRING, "O nome completo deve ser um texto"),
        FieldRule(
            "fullName", RuleKind.MIN_LENGTH, "O nome completo deve ter pelo menos 3 caracteres", limit=3
        ),
        FieldRule(
            "fullName",
            RuleKind.MAX_LENGTH,
            "O nome completo não deve ultrapassar 100 caracteres",
            limit=100,
        ),
        FieldRule("email", RuleKind.EMAIL, "O e-mail não é válido"),
        *_password_rules(),
        FieldRule("bio", RuleKind.STRING, "A biografia deve ser um texto"),
        FieldRule("bio", RuleKind.MIN_LENGTH, "A biografia deve ter pelo menos 10 caracteres", limit=10),
        FieldRule(
            "bio", RuleKind.MAX_LENGTH, "A biografia não deve ultrapassar 500 caracteres", limit=500
        ),
    ],
)

UPDATE_USER: DtoSchema = define_schema(
    "user-update",
    UpdateUserDto,
    [
        FieldRule("userId", RuleKind.UUID4, "O ID do usuário deve ser um UUID válido"),
        FieldRule("email", RuleKind.EMAIL, "O e-mail não é válido"),
        *_password_rules(),
    ],
)

CREATE_COMPANY: DtoSchema = define_schema(
    "company-create",
    CreateCompanyDto,
    [
        FieldRule("id", RuleKind.UUID4, "O id deve ser um UUID válido (versão 4)"),
        FieldRule("name", RuleKind.STRING, "O nome é obrigatório e deve ser um texto"),
        FieldRule("companyType", RuleKind.STRING, "O tipo de empresa é obrigatório e deve ser um texto"),
        FieldRule("address", RuleKind.STRING, "O endereço é obrigatório e deve ser um texto"),
        FieldRule("city", RuleKind.STRING, "A cidade é obrigatória e deve ser um texto"),
        FieldRule("state", RuleKind.STRING, "O estado é obrigatório e deve ser um texto"),
        FieldRule("postalCode", RuleKind.STRING, "O CEP é obrigatório e deve ser um texto"),
        FieldRule("country", RuleKind.STRING, "O país é obrigatório e deve ser um texto"),
        FieldRule("description", RuleKind.STRING, "A descrição deve ser um texto", optional=True),
    ],
)

UPDATE_APPOINTMENT_STATUS: DtoSchema = define_schema(
    "appointment-status-update",
    UpdateAppointmentStatusDto,
    [
        FieldRule("appointmentId", RuleKind.STRING, "O ID do agendamento deve ser um texto"),
        FieldRule("appointmentId", RuleKind.PRESENCE, "O ID do agendamento é obrigatório"),
        FieldRule("appointmentId", RuleKind.UUID4, "O ID do agendamento deve ser um UUID válido"),
        FieldRule("status", RuleKind.STRING, "O status deve ser um texto"),
        FieldRule("status", RuleKind.PRESENCE, "O status é obrigatório"),
    ],
)

DTO_SCHEMAS: dict[str, DtoSchema] = {
    schema.name: schema
    for schema in (
        UPDATE_USER_AVATAR,
        CREATE_SERVICE,
        UPDATE_SERVICE,
        CREATE_SECRETARY_PROFESSIONAL,
        CREATE_USER,
        UPDATE_USER,
        CREATE_COMPANY,
        UPDATE_APPOINTMENT_STATUS,
    )
}


def get_schema(kind: str) -> DtoSchema | None:
    """Retorna o schema registrado para o tipo de DTO, se existir."""
    return DTO_SCHEMAS.get(kind)

"""Pydantic models of the options used to create a Subnet in a Provider network."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationError,
)

from subnet_options.exceptions import PreconditionViolationError
from subnet_options.models.tags import Tag
from subnet_options.utils import invalid_empty


class SubnetCreationRequest(BaseModel):
    """Model with the options to create a subnet inside a virtual network (VLAN).

    Instances are frozen. Build them with `create`, `create_in_data_center` or
    `create_with_tags`; `with_metadata` returns a new instance.

    Attributes:
    ----------
        cidr (str): Address block, sub range of the parent network address space.
        description (str): Brief description of the subnet purpose.
        name (str): User friendly subnet name.
        parent_network_id (str): ID of the VLAN owning the subnet.
        data_center_id (str | None): Target data center. None means any data center
            chosen by the provider.
        metadata (Mapping of {str: Any}): Read only custom metadata to assign to the
            subnet.
    """

    cidr: Annotated[
        str,
        Field(description="Address block to allocate for the subnet."),
        AfterValidator(invalid_empty),
    ]
    description: Annotated[
        str,
        Field(description="Brief description of the subnet purpose."),
        AfterValidator(invalid_empty),
    ]
    name: Annotated[
        str,
        Field(description="User friendly subnet name."),
        AfterValidator(invalid_empty),
    ]
    parent_network_id: Annotated[
        str,
        Field(description="ID of the virtual network (VLAN) owning the subnet."),
        AfterValidator(invalid_empty),
    ]
    data_center_id: Annotated[
        str | None,
        Field(
            default=None,
            description="Data center hosting the subnet. When None the provider "
            "chooses it.",
        ),
        AfterValidator(invalid_empty),
    ]
    metadata: Annotated[
        dict[str, Any],
        Field(
            default_factory=dict,
            validate_default=True,
            description="Custom metadata associated to the subnet.",
        ),
        AfterValidator(MappingProxyType),
        PlainSerializer(lambda v: dict(v), return_type=dict[str, Any]),
    ]

    model_config = ConfigDict(frozen=True)

    def __hash__(self) -> int:
        # Metadata values may be unhashable; equal requests share these fields.
        return hash(
            (
                self.parent_network_id,
                self.data_center_id,
                self.cidr,
                self.name,
                self.description,
            )
        )

    @classmethod
    def _build(cls, **kwargs) -> "SubnetCreationRequest":
        """Validate the given attributes and create a new instance.

        Raises:
            PreconditionViolationError when at least one attribute is not valid.

        """
        try:
            return cls(**kwargs)
        except ValidationError as e:
            fields = {".".join(str(i) for i in err["loc"]) for err in e.errors()}
            msg = "Invalid subnet creation request. "
            msg += f"Wrong values for: {', '.join(sorted(fields))}"
            raise PreconditionViolationError(msg) from e

    @classmethod
    def create(
        cls, parent_network_id: str, cidr: str, name: str, description: str
    ) -> "SubnetCreationRequest":
        """Options for the basic approach to create a subnet.

        No data center is specified: the provider picks one, if appropriate.

        Args:
            parent_network_id (str): VLAN in which the subnet will be created.
            cidr (str): sub range of the VLAN address space reserved to the subnet.
            name (str): user friendly name of the new subnet.
            description (str): description of the subnet purpose.

        Returns:
            SubnetCreationRequest: options to create a subnet.

        Raises:
            PreconditionViolationError when a value is missing or empty.

        """
        return cls._build(
            parent_network_id=parent_network_id,
            cidr=cidr,
            name=name,
            description=description,
        )

    @classmethod
    def create_in_data_center(
        cls,
        parent_network_id: str,
        data_center_id: str,
        cidr: str,
        name: str,
        description: str,
    ) -> "SubnetCreationRequest":
        """Options to create a subnet in a specific data center.

        Args:
            parent_network_id (str): VLAN in which the subnet will be created.
            data_center_id (str): data center in which the subnet will be created.
            cidr (str): sub range of the VLAN address space reserved to the subnet.
            name (str): user friendly name of the new subnet.
            description (str): description of the subnet purpose.

        Returns:
            SubnetCreationRequest: options to create a subnet.

        Raises:
            PreconditionViolationError when a value is missing or empty.

        """
        if data_center_id is None:
            raise PreconditionViolationError(
                "Invalid subnet creation request. Wrong values for: data_center_id"
            )
        return cls._build(
            parent_network_id=parent_network_id,
            data_center_id=data_center_id,
            cidr=cidr,
            name=name,
            description=description,
        )

    @classmethod
    def create_with_tags(
        cls,
        parent_network_id: str,
        data_center_id: str,
        cidr: str,
        name: str,
        description: str,
        *tags: Tag,
    ) -> "SubnetCreationRequest":
        """Options to create a subnet in a specific data center with metadata.

        When multiple tags share the same key, the last one wins.

        Args:
            parent_network_id (str): VLAN in which the subnet will be created.
            data_center_id (str): data center in which the subnet will be created.
            cidr (str): sub range of the VLAN address space reserved to the subnet.
            name (str): user friendly name of the new subnet.
            description (str): description of the subnet purpose.
            tags (Tag): metadata to assign to the subnet.

        Returns:
            SubnetCreationRequest: options to create a subnet.

        Raises:
            PreconditionViolationError when a value is missing or empty.

        """
        request = cls.create_in_data_center(
            parent_network_id, data_center_id, cidr, name, description
        )
        return request.with_metadata({tag.key: tag.value for tag in tags})

    def with_metadata(self, metadata: Mapping[str, Any]) -> "SubnetCreationRequest":
        """Add metadata to associate with the subnet to create.

        The operation is additive: existing keys not in `metadata` are preserved,
        the others are overwritten. The current instance is not modified.

        Args:
            metadata (Mapping of {str: Any}): metadata to add.

        Returns:
            SubnetCreationRequest: a new instance with the merged metadata.

        Raises:
            PreconditionViolationError when metadata is not a mapping or a key is not
            a string.

        """
        if not isinstance(metadata, Mapping):
            msg = "Invalid subnet creation request. Wrong values for: metadata"
            raise PreconditionViolationError(msg)
        return self._build(**{**dict(self), "metadata": {**self.metadata, **metadata}})

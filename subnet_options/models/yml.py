"""Models and schemas to organize and validate data retrieved from YAML files."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, field_validator

from subnet_options.models.subnets import SubnetCreationRequest
from subnet_options.models.tags import Tag
from subnet_options.utils import invalid_empty


class YamlSubnet(BaseModel):
    """Model with the description of a subnet to create."""

    parent_network_id: Annotated[
        str, Field(description="ID of the virtual network (VLAN) owning the subnet.")
    ]
    cidr: Annotated[str, Field(description="Address block to allocate.")]
    name: Annotated[str, Field(description="User friendly subnet name.")]
    description: Annotated[str, Field(description="Subnet purpose.")]
    data_center_id: Annotated[
        str | None,
        Field(default=None, description="Data center hosting the subnet."),
        AfterValidator(invalid_empty),
    ]
    tags: Annotated[
        list[Tag], Field(default_factory=list, description="Subnet metadata.")
    ]

    def to_request(
        self,
        *,
        default_data_center: str | None = None,
        default_metadata: dict[str, str] | None = None,
    ) -> SubnetCreationRequest:
        """Convert the current item into a subnet creation request.

        Default metadata are overridden by tags with the same key.

        Args:
            default_data_center (str | None): data center to use when the item does
                not define one.
            default_metadata (dict of {str: str} | None): metadata shared by all the
                subnets.

        Returns:
            SubnetCreationRequest: the request built from this item.

        Raises:
            PreconditionViolationError when a mandatory value is empty.

        """
        if default_metadata is None:
            default_metadata = {}
        data_center_id = self.data_center_id or default_data_center

        if data_center_id is None:
            request = SubnetCreationRequest.create(
                self.parent_network_id, self.cidr, self.name, self.description
            )
        else:
            request = SubnetCreationRequest.create_in_data_center(
                self.parent_network_id,
                data_center_id,
                self.cidr,
                self.name,
                self.description,
            )
        return request.with_metadata(default_metadata).with_metadata(
            {tag.key: tag.value for tag in self.tags}
        )


class YamlConfig(BaseModel):
    """Model to load the content of a YAML file."""

    subnets: Annotated[
        list[YamlSubnet],
        Field(default_factory=list, description="List of subnets to create."),
    ]

    @field_validator("subnets")
    @classmethod
    def find_name_duplicates(cls, v: list[YamlSubnet]) -> list[YamlSubnet]:
        """Verify there are no subnets with the same name in the same VLAN."""
        seen = set()
        dupes = []
        for subnet in v:
            key = (subnet.parent_network_id, subnet.name)
            if key in seen:
                dupes.append(f"{subnet.name} in {subnet.parent_network_id}")
            seen.add(key)
        if len(dupes) > 0:
            raise ValueError(f"There are multiple subnets named: {', '.join(dupes)}")
        return v

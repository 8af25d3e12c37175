from cb_swagger.models import AllowableValues, AttributeDescriptor, EntityTypeDescriptor


class TestAttributeDescriptor:
    def test_create_minimal_attribute(self):
        attr = AttributeDescriptor(title="name", type="string")
        assert attr.title == "name"
        assert attr.is_required is False
        assert attr.allowable_values is None
        assert attr.has_default is False

    def test_parse_camel_case_json(self):
        attr = AttributeDescriptor.model_validate({
            "title": "houseNumber",
            "type": "int",
            "isRequired": True,
            "allowableValues": {"valueType": "Range", "min": 1, "max": 10},
        })
        assert attr.is_required is True
        assert attr.allowable_values.value_type == "Range"
        assert attr.allowable_values.min == 1
        assert isinstance(attr.allowable_values.min, int)

    def test_falsy_default_counts_as_present(self):
        assert AttributeDescriptor.model_validate({"title": "n", "type": "int", "defaultValue": 0}).has_default
        assert AttributeDescriptor.model_validate({"title": "b", "type": "boolean", "defaultValue": False}).has_default

    def test_null_default_counts_as_present(self):
        attr = AttributeDescriptor.model_validate({"title": "n", "type": "string", "defaultValue": None})
        assert attr.has_default is True
        assert attr.default_value is None

    def test_unknown_fields_ignored(self):
        attr = AttributeDescriptor.model_validate({
            "title": "name",
            "type": "string",
            "renderHint": "text",
            "isCore": True,
        })
        assert attr.title == "name"


class TestEntityTypeDescriptor:
    def test_parse_entity_type(self):
        entity = EntityTypeDescriptor.model_validate({
            "_id": "5a5f2c3e1b2c3d4e5f607182",
            "title": "Person",
            "isResource": True,
            "attributes": [{"title": "name", "type": "string"}],
        })
        assert entity.title == "Person"
        assert entity.is_resource is True
        assert entity.attributes[0].type == "string"
        assert entity.description is None

    def test_defaults(self):
        entity = EntityTypeDescriptor(title="Address")
        assert entity.attributes == []
        assert entity.is_resource is False

    def test_serialization_roundtrip(self):
        entity = EntityTypeDescriptor(
            title="Person",
            attributes=[
                AttributeDescriptor(
                    title="gender",
                    type="string",
                    allowable_values=AllowableValues(value_type="List", values=["M", "F"]),
                )
            ],
            is_resource=True,
        )
        data = entity.model_dump(by_alias=True)
        assert data["isResource"] is True
        entity2 = EntityTypeDescriptor.model_validate(data)
        assert entity2.attributes[0].allowable_values.values == ["M", "F"]

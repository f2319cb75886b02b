# (c) Copyright Datacraft, 2026
"""
Validation error flattening tests.
"""
from officeflow.core.errors import flatten_errors


def test_field_errors_grouped_by_dotted_path():
	errors = [
		{"loc": ("body", "blobUrl"), "msg": "Field required", "type": "missing"},
		{"loc": ("body", "metadata", "createdBy"), "msg": "Field required", "type": "missing"},
		{"loc": ("body", "blobUrl"), "msg": "Input should be a valid URL", "type": "url_parsing"},
		{"loc": ("query", "pk"), "msg": "Field required", "type": "missing"},
	]

	assert flatten_errors(errors) == {
		"formErrors": [],
		"fieldErrors": {
			"blobUrl": ["Field required", "Input should be a valid URL"],
			"metadata.createdBy": ["Field required"],
			"pk": ["Field required"],
		},
	}


def test_payload_level_errors_are_form_errors():
	errors = [{"loc": ("body",), "msg": "Input should be a valid dictionary", "type": "dict_type"}]

	assert flatten_errors(errors) == {
		"formErrors": ["Input should be a valid dictionary"],
		"fieldErrors": {},
	}

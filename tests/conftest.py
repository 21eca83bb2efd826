"""Shared fixtures for the extractor tests."""

import copy

import pytest

SAMPLE_API_DATA = {
    "api": [
        {
            "type": "get",
            "url": "/company/stats",
            "title": "Get company stats",
            "name": "GetStats",
            "group": "Company",
            "version": "1.0.0",
            "groupTitle": "Company",
        },
        {
            "type": "post",
            "url": "/domain/:domain/service",
            "title": "Add to Service",
            "name": "Add_to_Service",
            "group": "Domain",
            "deprecated": {"content": "Feature no longer available"},
            "description": "<p>Add a domain to a service (e.g. a Webspace).</p>",
            "parameter": {
                "fields": {
                    "Parameter": [
                        {
                            "group": "Parameter",
                            "type": "Integer",
                            "optional": False,
                            "field": "service_id",
                            "description": "<p>the id of the service</p>",
                        }
                    ]
                }
            },
            "header": {
                "fields": {
                    "Header": [
                        {
                            "group": "Header",
                            "type": "String",
                            "optional": True,
                            "field": "Authorization",
                            "description": "<p>Provide your access token here.</p>",
                        }
                    ]
                }
            },
            "error": {
                "fields": {
                    "Error 4xx": [
                        {
                            "group": "Error 4xx",
                            "optional": False,
                            "field": "401",
                            "description": "<p>The provided access token is not valid.</p>",
                        }
                    ]
                }
            },
        },
        {
            "type": "get",
            "url": "/services/:id/gameservers/games/minecraft",
            "title": "Details",
            "name": "Details",
            "group": "Game_Minecraft",
        },
    ]
}


@pytest.fixture
def sample_api_data():
    """A fresh copy of a small apiDoc document."""
    return copy.deepcopy(SAMPLE_API_DATA)

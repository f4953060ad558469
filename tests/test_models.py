"""Tests for graph template records."""

import pytest
from pydantic import ValidationError

from owmgraph.template.models import GraphContext, GraphSpec, SeriesDescriptor


class TestGraphContext:
    def test_macro_aliases(self):
        context = GraphContext.model_validate(
            {"DISP_HOSTNAME": "host1", "DISP_SERVICEDESC": "weather", "HOSTNAME": "ignored"}
        )
        assert context.host_display_name == "host1"
        assert context.service_display_name == "weather"

    def test_field_names(self):
        context = GraphContext(host_display_name="a", service_display_name="b")
        assert context.host_display_name == "a"

    def test_frozen(self):
        context = GraphContext(host_display_name="a", service_display_name="b")
        with pytest.raises(ValidationError):
            context.host_display_name = "c"


class TestSeriesDescriptor:
    def test_host_ds_entry(self):
        descriptor = SeriesDescriptor.model_validate(
            {
                "KEY": 3,
                "RRDFILE": "/var/lib/pnp4nagios/h/s_pressure.rrd",
                "DS": 1,
                "NAME": "pressure",
                "UNIT": "hPa",
                "TEMPLATE": "check_openweathermap",
                "LABEL": "pressure",
                "WARN": "",
            }
        )
        assert descriptor.key == 3
        assert descriptor.data_source_name == "1"
        assert descriptor.unit == "hPa"
        assert descriptor.vname == "var3"

    def test_missing_fields_default_empty(self):
        descriptor = SeriesDescriptor(key=1)
        assert descriptor.rrd_file == ""
        assert descriptor.display_name == ""
        assert descriptor.unit == ""
        assert descriptor.template == ""

    def test_none_becomes_empty(self):
        assert SeriesDescriptor(key=1, unit=None).unit == ""

    def test_key_required(self):
        with pytest.raises(ValidationError):
            SeriesDescriptor.model_validate({"NAME": "temp"})

    def test_text_key_kept(self):
        descriptor = SeriesDescriptor(key="temp")
        assert descriptor.key == "temp"
        assert descriptor.vname == "vartemp"

    def test_none_key_becomes_empty(self):
        assert SeriesDescriptor.model_validate({"KEY": None}).key == ""

    def test_integer_key_stays_integer(self):
        assert SeriesDescriptor(key=3).key == 3


class TestGraphSpec:
    def test_directives_keep_quoted_spaces(self):
        spec = GraphSpec(
            title_option="",
            draw_commands='DEF:var1=a.rrd:t:AVERAGE LINE2:var1#CC000080:"Wind speed" COMMENT:"a \\"b\\" c" ',
        )
        assert spec.directives() == [
            "DEF:var1=a.rrd:t:AVERAGE",
            'LINE2:var1#CC000080:"Wind speed"',
            'COMMENT:"a \\"b\\" c"',
        ]

    def test_template_arrays(self):
        spec = GraphSpec(title_option=" --title x ", draw_commands="DEF:a=b:c:AVERAGE ")
        assert spec.as_template_arrays() == {
            "opt": {1: " --title x "},
            "def": {1: "DEF:a=b:c:AVERAGE "},
        }

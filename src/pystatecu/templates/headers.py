"""
Documentation header templates for StateCU files.

Every line of a rendered header starts with ``#>`` so that readers skip
it as a comment; ``#>EndHeader`` closes the block.
"""

from __future__ import annotations

CROP_PATTERN_HEADER = """\
#>
#>  StateCU Crop Patterns (CDS) File
#>
{% for line in comments %}
{{ line | statecu_comment }}
{% endfor %}
{% if comments %}
#>
{% endif %}
{% if version10 %}
#>  Header format (i5,1x,i4,5x,i5,1x,i4,a5,a5)
{% else %}
#>  Header format (6x,i4,5x,6x,i4,a5,a5)
{% endif %}
#>
{% if version10 %}
#>  month1           :  First month of data (always 1).
{% endif %}
#>  year1            :  First year of data (calendar year).
{% if version10 %}
#>  month2           :  Last month of data (always 12).
{% endif %}
#>  year2            :  Last year of data (calendar year).
#>  units            :  Units for crop areas.
#>  yeartype         :  Year type (always CYR for calendar).
#>
{% if version10 %}
#>  Record 1 format (i4,1x,a12,8x,f10.3,i10) - for each year/CULocation.
{% else %}
#>  Record 1 format (i4,1x,a12,18x,f10.3,i10) - for each year/CULocation.
{% endif %}
#>
#>  Yr            tyr:  Year for data (calendar year).
#>  CULocation    tid:  CU Location ID (e.g., structure/station).
#>  TotalAcres ttacre:  Total acreage for the CU Location.
#>  NCrop            :  Number of crops at location/year.
#>
#>  Record 2 format (5x,a{{ crop_width }},f10.3{% if write_crop_area %},f10.3{% endif %}) - for each crop for Record 1
#>
#>  CropName    cropn:  Crop name (e.g., ALFALFA).
#>  Fraction     tpct:  Decimal fraction of total acreage
#>                      for the crop (0.0 to 1.0) - INFO ONLY.
#>                      Equal to crop acres/total acres.
#>                      Fractions should add to 1.0.
{% if write_crop_area %}
#>  Acres       acres:  Acreage for crop.
#>                      Should sum to the total acres.
{% endif %}
#>
{% if version10 %}
#>Yr  CULocation     TotalArea       NCrop
#>-exb----------exxxxxxxxb--------eb--------e
{% if write_crop_area %}
#>     CropName          Fraction    Acres
#>xxxb------------------eb--------eb--------e
{% else %}
#>     CropName          Fraction
#>xxxb------------------eb--------e
{% endif %}
{% else %}
#>Yr  CULocation                   TotalArea   NCrop
#>-exb----------exxxxxxxxxxxxxxxxxxb--------eb--------e
{% if write_crop_area %}
#>     CropName                    Fraction    Acres
#>xxxb----------------------------eb--------eb--------e
{% else %}
#>     CropName                    Fraction
#>xxxb----------------------------eb--------e
{% endif %}
{% endif %}
{% if not write_crop_area %}
#>   Writing crop areas has been disabled (only fractions are shown).
{% endif %}
{% if write_only_total %}
#>   Only totals for location are shown (area by crop has been disabled).
{% endif %}
#>EndHeader
"""

IRRIGATION_PRACTICE_HEADER = """\
#>
#>  StateCU Irrigation Practice Time Series (IPY) File
#>
{% for line in comments %}
{{ line | statecu_comment }}
{% endfor %}
{% if comments %}
#>
{% endif %}
{% if version10 %}
#>  Header format (i5,1x,i4,5x,i5,1x,i4,a5,a5)
{% else %}
#>  Header format (6x,i4,11x,i4,7x,a3)
{% endif %}
#>
{% if version10 %}
#>  month1           :  First month of data (always 1).
{% endif %}
#>  year1            :  First year of data (calendar year).
{% if version10 %}
#>  month2           :  Last month of data (always 12).
#>  units            :  Units for acreages.
{% endif %}
#>  year2            :  Last year of data (calendar year).
#>  yeartype         :  Year type (always CYR for calendar).
#>
{% if version10 %}
#>  Record format (i4,1x,a12,3(2x,f4.2),2(f8.{{ precision }}),f12.0,i3,f8.{{ precision }}) - each year/CULocation.
{% else %}
#>  Record format (i4,1x,a12,3(f6.2),4(f8.{{ precision }}),f12.0,i3,f8.{{ precision }},2(f8.{{ precision }})) - each year/CULocation.
{% endif %}
#>
#>  Yr             yr:  Year for data (calendar year).
#>  CULocation  aspid:  CU Location ID (e.g., structure/station).
#>  Surf         ceff:  Maximum efficiency for delivering
#>                      surface water supply to the farm
#>                      headgate (fraction).
#>  Flood        feff:  Maximum application efficiency for
#>                      flood irrigation (fraction).
#>  Spr          seff:  Maximum application efficiency for
#>                      sprinkler irrigation (fraction).
{% if version10 %}
#>  AcGW        gacre:  Acres with groundwater supply.
#>  AcSprnk     sacre:  Acres irrigated by sprinkler application.
{% else %}
#>  AcSwFl      acswfl: Acres with surface water only supply, flood.
#>  AcSwSpr     acswspr:Acres with surface water only supply, sprinkler.
#>  AcGwFl      acgwfl: Acres with groundwater supply, flood.
#>  AcGwSpr     acgwspr:Acres with groundwater supply, sprinkler.
{% endif %}
#>  PumpingMax mprate:  Maximum pumping volume (AF per month).
#>  GMode       gmode:  Groundwater use mode.
#>                      1=surface and GW are used to maximize supply.
#>                      2=surface water is used first on all
#>                      acreage, and then GW.
#>                      3=GW is used first on sprinkler
#>                      acreage and surface water shares for
#>                      the same acreage are available for recharge.
#>  AcTot       tacre:  Total acres irrigated - agrees with
#>                      crop pattern time series file (CDS).
{% if not version10 %}
#>  AcSW         acsw:  Acres with surface water only supply (information only).
#>  AcGW         acgw:  Acres with groundwater supply (information only).
{% endif %}
#>
#>                 Max  Efficiency
{% if version10 %}
#>Yr  CULocation   Surf  Flood Spr  AcGW   AcSprnk PumpingMax GMode  AcTot
#>-exb----------exxb--exxb--exxb--eb------eb------eb----------eb-eb------e
{% else %}
#>Yr  CULocation   Surf Flood   Spr AcSWFl  AcSWSpr AcGWFl  AcGWSpr PumpingMax GMode AcTot  AcSW    AcGW
#>-exb----------eb----eb----eb----eb------eb------eb------eb------eb----------eb-eb------eb------eb------e
{% endif %}
#>EndHeader
"""

HEADER_TEMPLATES = {
    "crop_pattern_header.txt": CROP_PATTERN_HEADER,
    "irrigation_practice_header.txt": IRRIGATION_PRACTICE_HEADER,
}

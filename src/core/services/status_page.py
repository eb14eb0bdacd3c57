import html
from string import Template

from core.models.station_config import stationConfigData

STATUS_PAGE = Template("""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta http-equiv="refresh" content="$refresh">
<title>$title</title>
</head>
<body>
<h2>Location: $location</h2>
<h2>$site</h2>
<pre>
$report</pre>
<p>The Arduino tries to send data to the server every minute (see timestamp).</br>
$dst_note</br>
Max/Min readings reset every Sunday at midnight.</br>
Approximate <a href="http://www.shorstmeyer.com/wxfaqs/humidity/humidity.html">dew point</a> is <a href="https://ag.arizona.edu/azmet/dewpoint.html">calculated</a> using the Magnus formula.</br>
(Fog <a href="https://en.wikipedia.org/wiki/Dew_point">forms</a> when the ambient temperature is around the dew point)</br>
Sunrise/Sunset times are <a href="http://williams.best.vwh.net/sunrise_sunset_algorithm.htm">estimated</a> and recalculated at midnight.</br>
</br>
This page will automatically refresh every $refresh seconds.</p>
</body>
</html>
""")


def render_status_page(report_text: str, config: stationConfigData) -> str:
    """Embed the report text in the status page.

    The text goes in verbatim unless escapeReport is set, in which case markup
    posted by a client is shown as text.
    """
    if config.escapeReport:
        report_text = html.escape(report_text, quote=False)
    return STATUS_PAGE.substitute(
        refresh=config.refreshSeconds,
        title=config.title,
        location=config.location,
        site=config.site,
        dst_note=config.dstNote,
        report=report_text,
    )

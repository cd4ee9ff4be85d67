# journal_markdown/styles.py
"""
CSS blocks injected in front of the converted HTML.

The journal field renders whatever sits inside [code]...[/code] as raw HTML,
so every feature that needs styling ships its own <style> block. Only the
blocks for features present in the output are emitted (see
postprocessors/code_wrapper.py).
"""

CODE_CSS = """<style type="text/css">
code { color: crimson; background-color: #f1f1f1; padding-left: 4px; padding-right: 4px; font-size: 110%; }
</style>
"""

HIGHLIGHT_CSS = """<style type="text/css">
.highlight { background-color: #fff3b0; padding: 2px 4px; }
</style>
"""

ALERT_CSS = """<style type="text/css">
.note { color: #1f6feb; background-color: #e6ecff; padding: 8px 12px; border-left: 4px solid #1f6feb; display: block; margin: 8px 0; }
.tip { color: #1a7f37; background-color: #e6ffec; padding: 8px 12px; border-left: 4px solid #1a7f37; display: block; margin: 8px 0; }
.important { color: #8250df; background-color: #f3e8ff; padding: 8px 12px; border-left: 4px solid #8250df; display: block; margin: 8px 0; }
.warning { color: #9a6700; background-color: #fff8c5; padding: 8px 12px; border-left: 4px solid #9a6700; display: block; margin: 8px 0; }
.caution { color: #cf222e; background-color: #ffebe9; padding: 8px 12px; border-left: 4px solid #cf222e; display: block; margin: 8px 0; }
</style>
"""

TABLE_CSS = """<style type="text/css">
.tg  {border-collapse:collapse;border-spacing:0;}
.tg td{border-color:black;border-style:solid;border-width:1px;font-family:Arial, sans-serif;font-size:14px;
  overflow:hidden;padding:10px 5px;word-break:normal;}
.tg th{border-color:black;border-style:solid;border-width:1px;font-family:Arial, sans-serif;font-size:14px;
  font-weight:normal;overflow:hidden;padding:10px 5px;word-break:normal;}
.tg .tg-0pky{border-color:inherit;text-align:left;vertical-align:top}
</style>
"""

"""ChordChart: renders a voicing as an ASCII fretboard diagram."""

from ukechord.voicing import Voicing

#: Minimal number of frets shown in a chart.
MIN_CHART_WIDTH = 4

# Column at which the first fret cell's centre is printed: string name (2),
# a space, the open-string marker and the two-character nut.
_FIRST_CELL_CENTRE = 7


class ChordChart:
    """
    ASCII chord chart of a single voicing.

    The highest string is printed on top, as on a chord sheet. Open strings
    are marked with ``o`` before the nut, pressed strings show the number of
    the finger pressing them, and the sounded note closes every line::

        A   ||---|---|-1-|---|- C
        E  o||---|---|---|---|- E
        C  o||---|---|---|---|- C
        G  o||---|---|---|---|- G

    Voicings played further up the neck start at their lowest pressed fret,
    which is printed below the chart.
    """

    def __init__(self, voicing: Voicing, width: int = MIN_CHART_WIDTH) -> None:
        """
        Args:
            voicing: The fingering to draw.
            width:   Number of frets to show; grows to fit the voicing.
        """
        self.voicing = voicing
        self.width = max(MIN_CHART_WIDTH, width, voicing.span + 1)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _base_fret(self) -> int:
        """First fret shown: the nut when everything fits, else the lowest pressed fret."""
        if self.voicing.max_fret <= self.width:
            return 1
        return self.voicing.position

    def _fingers(self) -> list[int]:
        """Finger (1-4) per string, 0 for open strings; lower frets get lower fingers."""
        frets = self.voicing.frets
        fingers = [0] * len(frets)
        pressed = sorted((fret, index) for index, fret in enumerate(frets) if fret > 0)
        for finger, (_fret, index) in enumerate(pressed, start=1):
            fingers[index] = finger
        return fingers

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self) -> str:
        base_fret = self._base_fret()
        nut = "||" if base_fret == 1 else "-|"
        fingers = self._fingers()

        lines: list[str] = []
        for index in reversed(range(len(self.voicing.strings))):
            string = self.voicing.strings[index]
            marker = "o" if string.fret == 0 else " "
            cells = "|".join(
                f"-{fingers[index]}-" if string.fret == fret else "---"
                for fret in range(base_fret, base_fret + self.width)
            )
            lines.append(f"{string.root.name:<2} {marker}{nut}{cells}|- {string.note.name}")

        if base_fret > 1:
            lines.append(" " * _FIRST_CELL_CENTRE + str(base_fret))

        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

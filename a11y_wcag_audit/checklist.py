"""Static guidance printed when an automated audit cannot run."""

USAGE_BANNER = """\
Automated accessibility audit unavailable: {reason}

To enable it:
  pip install "a11y-wcag-audit[browser]"
  playwright install chromium
  npm install            # installs axe-core into node_modules/
  a11y-audit http://localhost:3000

Until then, work through the manual checklist below.
"""

MANUAL_CHECKLIST = """\
MANUAL ACCESSIBILITY CHECKLIST (WCAG 2.0 A/AA)
============================================================

Keyboard
  [ ] Tab through the whole page; every interactive element is reachable
  [ ] Focus order follows the visual reading order
  [ ] A visible focus indicator is shown on every focused element
  [ ] No keyboard trap: focus can always move away (Tab / Shift+Tab / Esc)
  [ ] A skip link is the first focusable element and jumps to main content
  [ ] Menus, dialogs and custom widgets work with Enter, Space and arrow keys

Screen reader
  macOS: VoiceOver (Cmd+F5)    Windows: NVDA (free) or Narrator (Ctrl+Win+Enter)
  [ ] Page title and main landmark are announced
  [ ] Headings form a logical outline (navigate by heading)
  [ ] Images have meaningful alt text, decorative images are ignored
  [ ] Form fields announce their label, required state and errors
  [ ] Buttons and links announce a purpose that makes sense out of context
  [ ] Dynamic updates (toasts, validation) are announced via live regions

Visual
  [ ] Text contrast is at least 4.5:1 (3:1 for large text)
  [ ] Page is usable at 200% zoom without horizontal scrolling
  [ ] Information is not conveyed by color alone
  [ ] Touch targets are at least 44x44 CSS pixels
  [ ] Animations respect the "reduce motion" OS setting

Tools
  axe DevTools:   https://www.deque.com/axe/devtools/
  WAVE:           https://wave.webaim.org/
  Lighthouse:     built into Chrome DevTools
  Contrast:       https://webaim.org/resources/contrastchecker/
  WCAG quickref:  https://www.w3.org/WAI/WCAG21/quickref/
"""


def usage_banner(reason: str) -> str:
    return USAGE_BANNER.format(reason=reason)


__all__ = ["MANUAL_CHECKLIST", "usage_banner"]

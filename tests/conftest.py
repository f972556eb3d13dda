"""Shared fixtures for gemreadme tests."""

import pytest

from gemreadme.diagnostics import CollectingDiagnosticSink
from gemreadme.readme import ReadmeParser


SAMPLE_README = """# My Gem

[![Build Status](https://travis-ci.org/user/my_gem.svg)](https://travis-ci.org/user/my_gem)

My Gem says hello to the world in many different languages.

## Installation

Add this line to your application's Gemfile:

```ruby
gem 'my_gem'
```

Or install it yourself as:

```bash
gem install my_gem
```

## Usage

Require the gem and greet someone:

```ruby
require 'my_gem'
MyGem.hello("world")
```

### Configuration

```yaml
gem:
  greeting: hi
```

## Contributing

See [CONTRIBUTING](./CONTRIBUTING.md) for details.

```ruby
puts "not an example"
```
"""


@pytest.fixture
def sample_readme():
    return SAMPLE_README


@pytest.fixture
def sink():
    return CollectingDiagnosticSink()


@pytest.fixture
def parser(sink):
    return ReadmeParser(sink=sink)

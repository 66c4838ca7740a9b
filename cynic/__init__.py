from pyramid.config import Configurator

from .exceptions import StoreUnavailable
from .identity import IIdentityResolver
from .models import IBoard, IContentStore, appmaker
from .settings import BoardSettings
from .views import edit, new, redirect_home, save, store_unavailable
from .views import topics, view


def root_factory(request):
    return request.registry.getUtility(IBoard)


def add_routes(config):
    config.add_route('home', '/')
    config.add_view(redirect_home, route_name='home')

    config.add_route('topics', '/topics/')
    config.add_view(topics, route_name='topics', renderer='json')

    config.add_route('view', '/view/{topic}')
    config.add_view(view, route_name='view', renderer='json')

    config.add_route('edit', '/edit/{topic}')
    config.add_view(edit, route_name='edit', renderer='json')

    config.add_route('save', '/save/{topic}')
    config.add_view(save, route_name='save')

    config.add_route('new', '/new/')
    config.add_view(new, route_name='new')

    config.add_notfound_view(redirect_home)
    config.add_view(store_unavailable, context=StoreUnavailable)


def main(global_config, **settings):
    """ This function returns a Pyramid WSGI application.
    """
    board_settings = BoardSettings.from_settings(settings)
    config = Configurator(root_factory=root_factory, settings=settings)

    board = appmaker(board_settings)
    config.registry.board_settings = board_settings
    config.registry.registerUtility(board, IBoard)
    config.registry.registerUtility(board.store, IContentStore)
    config.registry.registerUtility(board.resolver, IIdentityResolver)

    config.add_static_view('images', board_settings.images_dir,
                           cache_max_age=3600)
    add_routes(config)

    return config.make_wsgi_app()
